from werkzeug.security import generate_password_hash, check_password_hash
from sitebuilder.extensions import db
from .base import BaseModel

ROLE_ADMIN = "admin"
ROLE_USER = "user"


class User(BaseModel):
    __tablename__ = 'users'

    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password_hash = db.Column(db.String(256), nullable=False)

    role = db.Column(db.String(50), nullable=False, default=ROLE_USER)
    is_active = db.Column(db.Boolean, default=True)

    websites = db.relationship("Website", back_populates="owner")

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    @property
    def is_admin(self):
        return self.role == ROLE_ADMIN

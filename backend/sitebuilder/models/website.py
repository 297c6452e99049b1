from sitebuilder.extensions import db
from .base import BaseModel


class Website(BaseModel):
    __tablename__ = "websites"

    owner_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, index=True)
    published_at = db.Column(db.DateTime, nullable=True)

    __table_args__ = (
        db.UniqueConstraint("slug", name="uq_website_slug"),
    )

    owner = db.relationship("User", back_populates="websites")

    # Ordered by page position, cascade deletes
    sections = db.relationship(
        "ProjectSection",
        back_populates="website",
        order_by="ProjectSection.order",
        cascade="all, delete-orphan"
    )

from sitebuilder.extensions import db
from .base import BaseModel


class SectionTemplate(BaseModel):
    __tablename__ = "sections"

    category_id = db.Column(db.String(36), db.ForeignKey("section_categories.id"), nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    version = db.Column(db.Integer, nullable=False, default=1)
    default_data = db.Column(db.JSON, nullable=False, default=dict)
    created_by = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False)

    category = db.relationship("SectionCategory", back_populates="sections")
    creator = db.relationship("User")
    variants = db.relationship(
        "SectionVariant",
        back_populates="template",
        order_by="SectionVariant.created_at",
        cascade="all, delete-orphan"
    )

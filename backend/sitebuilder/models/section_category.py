from sitebuilder.extensions import db
from .base import BaseModel


class SectionCategory(BaseModel):
    __tablename__ = "section_categories"

    name = db.Column(db.String(100), nullable=False)
    slug = db.Column(db.String(100), unique=True, nullable=False, index=True)  # header, hero, pricing
    description = db.Column(db.Text, nullable=True)

    sections = db.relationship("SectionTemplate", back_populates="category")

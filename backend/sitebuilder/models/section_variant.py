from sitebuilder.extensions import db
from .base import BaseModel


class SectionVariant(BaseModel):
    __tablename__ = "section_variants"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id"), nullable=False, index=True)
    label = db.Column(db.String(200), nullable=False)
    variant_data = db.Column(db.JSON, nullable=False, default=dict)  # overrides a subset of default_data

    template = db.relationship("SectionTemplate", back_populates="variants")

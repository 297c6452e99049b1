from sitebuilder.extensions import db
from .base import BaseModel, utc_now


class ProjectSection(BaseModel):
    __tablename__ = "project_sections"

    website_id = db.Column(db.String(36), db.ForeignKey("websites.id"), nullable=False, index=True)
    section_id = db.Column(db.String(36), db.ForeignKey("sections.id"), nullable=False)
    variant_id = db.Column(db.String(36), db.ForeignKey("section_variants.id"), nullable=True)
    custom_data = db.Column(db.JSON(none_as_null=True), nullable=True)
    order = db.Column(db.Integer, nullable=False, default=0)  # sort key only, gaps allowed
    published = db.Column(db.Boolean, nullable=False, default=False)
    saved_at = db.Column(db.DateTime, default=utc_now)

    __table_args__ = (
        db.Index("idx_project_section_website_order", "website_id", "order"),
    )

    website = db.relationship("Website", back_populates="sections")
    template = db.relationship("SectionTemplate")
    variant = db.relationship("SectionVariant")

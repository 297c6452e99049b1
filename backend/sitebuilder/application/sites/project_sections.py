# sitebuilder/application/sites/project_sections.py
from typing import Any, Dict, Optional
from flask import current_app
from sitebuilder.extensions import db
from sitebuilder.models.base import utc_now
from sitebuilder.models.project_section import ProjectSection
from sitebuilder.models.section import SectionTemplate
from sitebuilder.models.section_variant import SectionVariant
from sitebuilder.domain.exceptions import NotFoundError, ValidationError, field_error
from sitebuilder.utils.transaction import transactional
from sitebuilder.utils.validation import (
    as_bool,
    as_int,
    is_sort_key,
    parse_json_field,
    validate_body,
)
from .lookup import get_project_section, get_website


def _custom_data(value: Any) -> Optional[Dict[str, Any]]:
    parsed = parse_json_field(value, "custom_data")
    if parsed is None:
        return None
    if not isinstance(parsed, dict):
        raise ValidationError(
            "custom_data must be a JSON object",
            errors=[field_error("custom_data", "custom_data must be a JSON object")]
        )
    return parsed


def _resolve_variant(template: SectionTemplate, variant_id: Optional[str]) -> Optional[SectionVariant]:
    if not variant_id:
        return None

    variant = SectionVariant.query.filter_by(id=variant_id, section_id=template.id).first()
    if not variant:
        raise NotFoundError("Variant not found")
    return variant


def add_project_section(
    *,
    website_id: str,
    data: Dict[str, Any],
) -> ProjectSection:
    """Place a section template (optionally a variant) on a website."""
    validate_body(
        data,
        required={"section_id": "Section ID is required"},
        numeric={"order": "Order is required"},
    )

    if not is_sort_key(data["order"]):
        raise ValidationError("Validation failed", errors=[field_error("order", "Order must be a number")])

    website = get_website(website_id)

    template = db.session.get(SectionTemplate, data["section_id"])
    if not template:
        raise NotFoundError("Section not found")

    variant = _resolve_variant(template, data.get("variant_id"))

    project_section = ProjectSection()
    project_section.website_id = website.id
    project_section.section_id = template.id
    project_section.variant_id = variant.id if variant else None
    project_section.custom_data = _custom_data(data.get("custom_data"))
    project_section.order = as_int(data["order"])
    project_section.saved_at = utc_now()

    with transactional():
        db.session.add(project_section)

    current_app.logger.info(
        "Section %s placed on website %s at order %s",
        template.id, website.id, project_section.order
    )
    return project_section


def update_project_section(
    *,
    project_section: ProjectSection,
    data: Dict[str, Any],
) -> ProjectSection:
    """
    Partial update of custom_data, order, variant_id and published.
    Every call touches saved_at, even when no field changes.
    """
    if "order" in data and not is_sort_key(data["order"]):
        raise ValidationError("Validation failed", errors=[field_error("order", "Order must be a number")])

    if "custom_data" in data:
        project_section.custom_data = _custom_data(data["custom_data"])

    if "order" in data:
        project_section.order = as_int(data["order"])

    if "variant_id" in data:
        variant = _resolve_variant(project_section.template, data["variant_id"])
        project_section.variant_id = variant.id if variant else None

    if "published" in data:
        project_section.published = as_bool(data["published"])

    project_section.saved_at = utc_now()

    with transactional():
        db.session.add(project_section)

    return project_section


def remove_project_section(
    *,
    website_id: str,
    project_section_id: str,
) -> None:
    project_section = get_project_section(
        website_id=website_id,
        project_section_id=project_section_id
    )

    with transactional():
        db.session.delete(project_section)

    current_app.logger.info("Project section %s removed from website %s", project_section_id, website_id)

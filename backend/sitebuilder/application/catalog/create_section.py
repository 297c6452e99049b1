from typing import Any, Dict, Optional
from flask import current_app
from werkzeug.datastructures import FileStorage
from sitebuilder.extensions import db
from sitebuilder.models.section import SectionTemplate
from sitebuilder.models.section_category import SectionCategory
from sitebuilder.models.section_variant import SectionVariant
from sitebuilder.domain.exceptions import NotFoundError
from sitebuilder.utils.media import save_file
from sitebuilder.utils.transaction import transactional
from sitebuilder.utils.validation import parse_json_object, validate_body


def create_section_template(
    *,
    actor_id: str,
    data: Dict[str, Any],
    thumbnail: Optional[FileStorage] = None,
) -> SectionTemplate:
    """
    Create a reusable section template.

    default_data may arrive parsed (JSON body) or serialized (multipart form).
    An uploaded thumbnail is stored and its URL recorded as
    default_data["thumbnail"].
    """
    validate_body(data, required={
        "name": "Name is required",
        "category_id": "Category ID is required",
        "default_data": "Default data is required",
    })

    default_data = parse_json_object(data["default_data"], "default_data")

    category = db.session.get(SectionCategory, data["category_id"])
    if not category:
        raise NotFoundError("Category not found")

    if thumbnail:
        default_data["thumbnail"] = save_file(thumbnail)

    section = SectionTemplate()
    section.name = str(data["name"]).strip()
    section.category_id = category.id
    section.default_data = default_data
    section.created_by = actor_id

    with transactional():
        db.session.add(section)

    current_app.logger.info("Section template %s created in category %s", section.id, category.slug)
    return section


def create_section_variant(
    *,
    section_id: str,
    data: Dict[str, Any],
    thumbnail: Optional[FileStorage] = None,
) -> SectionVariant:
    validate_body(data, required={
        "label": "Label is required",
        "variant_data": "Variant data is required",
    })

    section = db.session.get(SectionTemplate, section_id)
    if not section:
        raise NotFoundError("Section not found")

    variant_data = parse_json_object(data["variant_data"], "variant_data")

    if thumbnail:
        variant_data["thumbnail"] = save_file(thumbnail)

    variant = SectionVariant()
    variant.section_id = section.id
    variant.label = str(data["label"]).strip()
    variant.variant_data = variant_data

    with transactional():
        db.session.add(variant)

    return variant

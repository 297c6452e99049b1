from typing import Any, Dict
from sqlalchemy.exc import IntegrityError
from sitebuilder.extensions import db
from sitebuilder.models.section_category import SectionCategory
from sitebuilder.domain.exceptions import ValidationError, field_error
from sitebuilder.utils.transaction import transactional
from sitebuilder.utils.validation import validate_body


def create_category(*, data: Dict[str, Any]) -> SectionCategory:
    validate_body(data, required={
        "name": "Name is required",
        "slug": "Slug is required",
    })

    slug = str(data["slug"]).strip()
    taken = ValidationError("Slug already exists", errors=[field_error("slug", "Slug already exists")])

    if SectionCategory.query.filter_by(slug=slug).first():
        raise taken

    category = SectionCategory()
    category.name = str(data["name"]).strip()
    category.slug = slug
    category.description = data.get("description")

    try:
        with transactional():
            db.session.add(category)
    except IntegrityError as exc:
        raise taken from exc

    return category

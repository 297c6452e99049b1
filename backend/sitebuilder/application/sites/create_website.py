from typing import Any, Dict
from flask import current_app
from sqlalchemy.exc import IntegrityError
from sitebuilder.extensions import db
from sitebuilder.models.website import Website
from sitebuilder.domain.exceptions import ValidationError, field_error
from sitebuilder.utils.transaction import transactional
from sitebuilder.utils.validation import validate_body


def _slug_taken() -> ValidationError:
    return ValidationError("Slug already exists", errors=[field_error("slug", "Slug already exists")])


def create_website(
    *,
    owner_id: str,
    data: Dict[str, Any],
) -> Website:
    """
    Create a new, unpublished website.

    Edge cases handled:
    - Missing required fields
    - Duplicate slug, including one inserted concurrently after the check
    """
    validate_body(data, required={
        "name": "Name is required",
        "slug": "Slug is required",
    })

    slug = str(data["slug"]).strip()

    if Website.query.filter_by(slug=slug).first():
        raise _slug_taken()

    website = Website()
    website.owner_id = owner_id
    website.name = str(data["name"]).strip()
    website.slug = slug

    try:
        with transactional():
            db.session.add(website)
    except IntegrityError as exc:
        # Lost the race against another insert with the same slug
        raise _slug_taken() from exc

    current_app.logger.info("Website %s created by %s", website.id, owner_id)
    return website

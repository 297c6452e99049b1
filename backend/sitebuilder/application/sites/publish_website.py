from flask import current_app
from sitebuilder.models.base import utc_now
from sitebuilder.models.project_section import ProjectSection
from sitebuilder.models.website import Website
from sitebuilder.utils.transaction import transactional
from .lookup import get_website


def publish_website(*, website_id: str) -> Website:
    """
    Stamp the website's publish time and mark every one of its sections
    published. Both writes share one transaction.
    """
    website = get_website(website_id)

    with transactional():
        website.published_at = utc_now()

        updated = (
            ProjectSection.query
            .filter_by(website_id=website.id)
            .update({"published": True}, synchronize_session=False)
        )

    current_app.logger.info("Website %s published (%d sections)", website.id, updated)
    return website

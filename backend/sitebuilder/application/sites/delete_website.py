from flask import current_app
from sitebuilder.extensions import db
from sitebuilder.utils.transaction import transactional
from .lookup import get_website


def delete_website(*, website_id: str) -> None:
    """Hard-delete a website; its project sections go with it."""
    website = get_website(website_id)

    with transactional():
        db.session.delete(website)

    current_app.logger.info("Website %s deleted", website_id)

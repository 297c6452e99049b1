from sitebuilder.extensions import db
from sitebuilder.models.website import Website
from sitebuilder.models.project_section import ProjectSection
from sitebuilder.domain.exceptions import NotFoundError


def get_website(website_id: str) -> Website:
    website = db.session.get(Website, website_id)
    if not website:
        raise NotFoundError("Website not found")
    return website


def get_project_section(*, website_id: str, project_section_id: str) -> ProjectSection:
    project_section = ProjectSection.query.filter_by(
        id=project_section_id,
        website_id=website_id
    ).first()

    if not project_section:
        raise NotFoundError("Project section not found")
    return project_section


def list_project_sections(website_id: str):
    """Sections of one website in page order; ties keep insertion order."""
    return (
        ProjectSection.query
        .filter_by(website_id=website_id)
        .order_by(ProjectSection.order.asc(), ProjectSection.created_at.asc())
        .all()
    )

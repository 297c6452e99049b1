from .common import iso


def normalize_website(website, with_counts=False, with_owner=False):
    data = {
        "id": website.id,
        "owner_id": website.owner_id,
        "name": website.name,
        "slug": website.slug,
        "created_at": iso(website.created_at),
        "published_at": iso(website.published_at),
    }

    if with_counts:
        sections = website.sections
        data["section_count"] = len(sections)
        data["published_section_count"] = sum(1 for s in sections if s.published)

    if with_owner:
        data["owner_name"] = website.owner.name
        data["owner_email"] = website.owner.email

    return data

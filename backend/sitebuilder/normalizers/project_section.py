from sitebuilder.rendering.merge import effective_content
from .common import iso


def normalize_project_section(project_section):
    """Placed section joined with its template, category and variant."""
    template = project_section.template
    variant = project_section.variant

    return {
        "id": project_section.id,
        "website_id": project_section.website_id,
        "section_id": project_section.section_id,
        "variant_id": project_section.variant_id,
        "custom_data": project_section.custom_data,
        "order": project_section.order,
        "published": project_section.published,
        "saved_at": iso(project_section.saved_at),
        "created_at": iso(project_section.created_at),
        "section_name": template.name,
        "default_data": template.default_data or {},
        "category_name": template.category.name,
        "category_slug": template.category.slug,
        "variant_label": variant.label if variant else None,
        "variant_data": variant.variant_data if variant else None,
        "content": effective_content(project_section),
    }

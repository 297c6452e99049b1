from .common import iso


def normalize_category(category):
    return {
        "id": category.id,
        "name": category.name,
        "slug": category.slug,
        "description": category.description,
        "created_at": iso(category.created_at),
    }


def normalize_variant(variant):
    return {
        "id": variant.id,
        "section_id": variant.section_id,
        "label": variant.label,
        "variant_data": variant.variant_data or {},
        "created_at": iso(variant.created_at),
    }


def normalize_section_template(section, include_variants=False):
    data = {
        "id": section.id,
        "name": section.name,
        "category_id": section.category_id,
        "category_name": section.category.name,
        "category_slug": section.category.slug,
        "version": section.version,
        "default_data": section.default_data or {},
        "created_by": section.created_by,
        "created_by_name": section.creator.name if section.creator else None,
        "created_at": iso(section.created_at),
    }

    if include_variants:
        data["variants"] = [normalize_variant(v) for v in section.variants]

    return data

# sitebuilder/rendering/merge.py
from typing import Any, Dict, Optional


def merge_content(
    default_data: Optional[Dict[str, Any]],
    variant_data: Optional[Dict[str, Any]] = None,
    custom_data: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Resolve the effective content of a placed section.

    Precedence (right-biased): template defaults < variant < customization.
    The merge is shallow: a later source replaces nested lists and objects
    wholesale. A missing source contributes nothing and never removes keys.
    """
    return {
        **(default_data or {}),
        **(variant_data or {}),
        **(custom_data or {}),
    }


def effective_content(project_section) -> Dict[str, Any]:
    template = project_section.template
    variant = project_section.variant

    return merge_content(
        template.default_data,
        variant.variant_data if variant else None,
        project_section.custom_data,
    )

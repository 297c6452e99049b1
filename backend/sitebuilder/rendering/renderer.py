# sitebuilder/rendering/renderer.py
"""
Markup rendering for exported sites.

Each section category owns one Jinja2 template under
``templates/export/sections``. Content values are interpolated verbatim
(autoescape is off); missing fields and explicit nulls render as empty strings.
"""
from typing import Any, Dict, Iterable, Optional

from jinja2 import ChainableUndefined, Environment, PackageLoader

from sitebuilder.config import TAILWIND_CDN_URL

SECTION_TEMPLATES: Dict[str, str] = {
    "header": "sections/header.html",
    "hero": "sections/hero.html",
    "about": "sections/about.html",
    "services": "sections/services.html",
    "pricing": "sections/pricing.html",
    "footer": "sections/footer.html",
    "faq": "sections/faq.html",
    "stats": "sections/stats.html",
    "newsletter": "sections/newsletter.html",
    "contact": "sections/contact.html",
}

GENERIC_TEMPLATE = "sections/generic.html"
DOCUMENT_TEMPLATE = "document.html"

env = Environment(
    loader=PackageLoader("sitebuilder", "templates/export"),
    autoescape=False,
    undefined=ChainableUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    finalize=lambda value: "" if value is None else value,
)


def is_known_category(category_slug: Optional[str]) -> bool:
    return category_slug in SECTION_TEMPLATES


def render_section(category_slug: Optional[str], content: Optional[Dict[str, Any]]) -> str:
    """Render one section fragment; unknown categories get the generic block."""
    if is_known_category(category_slug):
        template_name = SECTION_TEMPLATES[category_slug]
    else:
        template_name = GENERIC_TEMPLATE
    template = env.get_template(template_name)

    # Passed positionally so content keys never clash with render() arguments
    return template.render(content or {})


def render_document(
    title: str,
    fragments: Iterable[str],
    css_url: str = TAILWIND_CDN_URL,
) -> str:
    template = env.get_template(DOCUMENT_TEMPLATE)
    return template.render(title=title, css_url=css_url, body="".join(fragments))

# sitebuilder/application/sites/export_website.py
"""
Static export of a website.

Sections are merged, rendered in page order and wrapped in one HTML
document. The document and a mirror of the uploads folder are packed into
a deflate-compressed zip held in memory. Nothing stored is modified.
"""
import io
import zipfile
from typing import Any, Dict, List, Optional

from flask import current_app

from sitebuilder.config import TAILWIND_CDN_URL
from sitebuilder.models.project_section import ProjectSection
from sitebuilder.models.website import Website
from sitebuilder.rendering.merge import effective_content
from sitebuilder.rendering.renderer import render_document, render_section
from sitebuilder.utils.media import iter_upload_files
from .lookup import get_website, list_project_sections

INDEX_FILENAME = "index.html"
UPLOADS_ARCHIVE_DIR = "uploads"


def export_filename(website: Website) -> str:
    return f"{website.slug}-export.zip"


def build_site_document(
    website: Website,
    sections: List[ProjectSection],
    css_url: str = TAILWIND_CDN_URL,
) -> str:
    fragments = [
        render_section(section.template.category.slug, effective_content(section))
        for section in sections
    ]
    return render_document(website.name, fragments, css_url=css_url)


def build_archive(document: str, upload_folder: Optional[str]) -> io.BytesIO:
    """Zip index.html plus every file under upload_folder (if it exists)."""
    buffer = io.BytesIO()

    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED, compresslevel=9) as zf:
        zf.writestr(INDEX_FILENAME, document)

        for path, relative in iter_upload_files(upload_folder):
            zf.write(path, f"{UPLOADS_ARCHIVE_DIR}/{relative}")

    buffer.seek(0)
    return buffer


def export_website(
    *,
    website_id: str,
    upload_folder: Optional[str],
    css_url: str = TAILWIND_CDN_URL,
) -> Dict[str, Any]:
    """
    Build the downloadable archive for one website.

    Raises NotFoundError before any archive work when the website is missing.
    Returns {"filename", "archive"}.
    """
    website = get_website(website_id)
    sections = list_project_sections(website.id)

    document = build_site_document(website, sections, css_url=css_url)
    archive = build_archive(document, upload_folder)

    current_app.logger.info(
        "Exported website %s (%d sections, %d bytes)",
        website.id, len(sections), archive.getbuffer().nbytes
    )

    return {
        "filename": export_filename(website),
        "archive": archive,
    }

# sitebuilder/api/sites.py
from flask import current_app, jsonify, send_file
from flask_jwt_extended import current_user, jwt_required
from sitebuilder.application.sites.create_website import create_website
from sitebuilder.application.sites.delete_website import delete_website
from sitebuilder.application.sites.export_website import export_website
from sitebuilder.application.sites.lookup import (
    get_project_section,
    get_website,
    list_project_sections,
)
from sitebuilder.application.sites.project_sections import (
    add_project_section,
    remove_project_section,
    update_project_section,
)
from sitebuilder.application.sites.publish_website import publish_website
from sitebuilder.domain.exceptions import SiteBuilderError
from sitebuilder.models.website import Website
from sitebuilder.normalizers.project_section import normalize_project_section
from sitebuilder.normalizers.website import normalize_website
from sitebuilder.utils.decorators import owner_or_admin
from sitebuilder.utils.optimistic_lock import enforce_optimistic_lock
from sitebuilder.utils.validation import request_body
from . import api_bp


# ------------------------
# Websites
# ------------------------

@api_bp.route("/sites", methods=["GET"])
@jwt_required()
def list_websites():
    websites = (
        Website.query
        .filter_by(owner_id=current_user.id)
        .order_by(Website.created_at.desc())
        .all()
    )
    return jsonify([normalize_website(w, with_counts=True) for w in websites])


@api_bp.route("/sites", methods=["POST"])
@jwt_required()
def add_website():
    website = create_website(
        owner_id=current_user.id,
        data=request_body(),
    )
    return jsonify(normalize_website(website)), 201


@api_bp.route("/sites/<site_id>", methods=["GET"])
@jwt_required()
@owner_or_admin
def get_site(site_id):
    return jsonify(normalize_website(get_website(site_id)))


@api_bp.route("/sites/<site_id>", methods=["DELETE"])
@jwt_required()
@owner_or_admin
def delete_site(site_id):
    delete_website(website_id=site_id)
    return jsonify({"message": "Website removed"}), 200


@api_bp.route("/sites/<site_id>/publish", methods=["POST"])
@jwt_required()
@owner_or_admin
def publish_site(site_id):
    website = publish_website(website_id=site_id)
    return jsonify(normalize_website(website)), 200


@api_bp.route("/sites/<site_id>/export", methods=["GET"])
@jwt_required()
@owner_or_admin
def export_site(site_id):
    try:
        bundle = export_website(
            website_id=site_id,
            upload_folder=current_app.config.get("UPLOAD_FOLDER"),
            css_url=current_app.config["EXPORT_CSS_URL"],
        )
    except SiteBuilderError:
        raise
    except Exception:
        current_app.logger.exception("Export of website %s failed", site_id)
        return jsonify({"message": "Server error"}), 500

    return send_file(
        bundle["archive"],
        mimetype="application/zip",
        as_attachment=True,
        download_name=bundle["filename"],
    )


# ------------------------
# Project sections
# ------------------------

@api_bp.route("/sites/<site_id>/sections", methods=["GET"])
@jwt_required()
@owner_or_admin
def list_site_sections(site_id):
    get_website(site_id)
    return jsonify([
        normalize_project_section(ps)
        for ps in list_project_sections(site_id)
    ])


@api_bp.route("/sites/<site_id>/sections", methods=["POST"])
@jwt_required()
@owner_or_admin
def add_site_section(site_id):
    project_section = add_project_section(
        website_id=site_id,
        data=request_body(),
    )
    return jsonify(normalize_project_section(project_section)), 201


@api_bp.route("/sites/<site_id>/sections/<ps_id>", methods=["PATCH"])
@jwt_required()
@owner_or_admin
def update_site_section(site_id, ps_id):
    project_section = get_project_section(website_id=site_id, project_section_id=ps_id)

    # -----------------------
    # Optimistic Locking Check
    # -----------------------
    enforce_optimistic_lock(project_section, field="saved_at")

    project_section = update_project_section(
        project_section=project_section,
        data=request_body(),
    )
    return jsonify(normalize_project_section(project_section)), 200


@api_bp.route("/sites/<site_id>/sections/<ps_id>", methods=["DELETE"])
@jwt_required()
@owner_or_admin
def delete_site_section(site_id, ps_id):
    remove_project_section(website_id=site_id, project_section_id=ps_id)
    return jsonify({"message": "Project section removed"}), 200

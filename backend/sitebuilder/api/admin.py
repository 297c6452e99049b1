# sitebuilder/api/admin.py
from flask import request, jsonify
from flask_jwt_extended import current_user, jwt_required
from sitebuilder.application.catalog.create_category import create_category
from sitebuilder.application.catalog.create_section import (
    create_section_template,
    create_section_variant,
)
from sitebuilder.models.section import SectionTemplate
from sitebuilder.models.section_category import SectionCategory
from sitebuilder.models.user import User
from sitebuilder.models.website import Website
from sitebuilder.normalizers.section import (
    normalize_category,
    normalize_section_template,
    normalize_variant,
)
from sitebuilder.normalizers.user import normalize_user
from sitebuilder.normalizers.website import normalize_website
from sitebuilder.utils.decorators import admin_required
from sitebuilder.utils.validation import request_body
from . import api_bp


def _request_data():
    # Multipart when a thumbnail is attached, JSON otherwise
    return request.form.to_dict() if request.form else request_body()


# ------------------------
# Categories
# ------------------------

@api_bp.route("/admin/categories", methods=["GET"])
@jwt_required()
@admin_required
def list_categories():
    categories = SectionCategory.query.order_by(SectionCategory.name.asc()).all()
    return jsonify([normalize_category(c) for c in categories])


@api_bp.route("/admin/categories", methods=["POST"])
@jwt_required()
@admin_required
def add_category():
    category = create_category(data=request_body())
    return jsonify(normalize_category(category)), 201


# ------------------------
# Section templates
# ------------------------

@api_bp.route("/admin/sections", methods=["GET"])
@jwt_required()
@admin_required
def list_sections():
    sections = SectionTemplate.query.order_by(SectionTemplate.created_at.desc()).all()
    return jsonify([normalize_section_template(s, include_variants=True) for s in sections])


@api_bp.route("/admin/sections", methods=["POST"])
@jwt_required()
@admin_required
def add_section():
    section = create_section_template(
        actor_id=current_user.id,
        data=_request_data(),
        thumbnail=request.files.get("thumbnail"),
    )
    return jsonify(normalize_section_template(section, include_variants=True)), 201


@api_bp.route("/admin/sections/<section_id>/variants", methods=["POST"])
@jwt_required()
@admin_required
def add_variant(section_id):
    variant = create_section_variant(
        section_id=section_id,
        data=_request_data(),
        thumbnail=request.files.get("thumbnail"),
    )
    return jsonify(normalize_variant(variant)), 201


# ------------------------
# Overviews
# ------------------------

@api_bp.route("/admin/websites", methods=["GET"])
@jwt_required()
@admin_required
def list_all_websites():
    websites = Website.query.order_by(Website.created_at.desc()).all()
    return jsonify([
        normalize_website(w, with_counts=True, with_owner=True)
        for w in websites
    ])


@api_bp.route("/admin/users", methods=["GET"])
@jwt_required()
@admin_required
def list_users():
    users = User.query.order_by(User.created_at.desc()).all()
    return jsonify([normalize_user(u, admin=True) for u in users])

"""Shared fixtures for backend tests."""

from __future__ import annotations

from typing import Any

import pytest

from sitebuilder import create_app
from sitebuilder.application.accounts.register_user import register_user
from sitebuilder.extensions import db
from sitebuilder.models.section import SectionTemplate
from sitebuilder.models.section_category import SectionCategory
from sitebuilder.models.section_variant import SectionVariant
from sitebuilder.models.user import ROLE_ADMIN, ROLE_USER

PASSWORD = "secret123"


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------


@pytest.fixture()
def app(tmp_path):
    app = create_app("testing", {
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'sitebuilder_test.db'}",
        "UPLOAD_FOLDER": str(tmp_path / "uploads"),
    })

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------


def create_user(app, *, name: str, email: str, role: str = ROLE_USER) -> str:
    with app.app_context():
        user = register_user(data={"name": name, "email": email, "password": PASSWORD}, role=role)
        return user.id


def login(client, email: str) -> dict[str, str]:
    res = client.post("/api/auth/login", json={"email": email, "password": PASSWORD})
    assert res.status_code == 200, res.get_json()
    return {"x-auth-token": res.get_json()["token"]}


@pytest.fixture()
def admin_headers(app, client) -> dict[str, str]:
    create_user(app, name="Admin", email="admin@example.com", role=ROLE_ADMIN)
    return login(client, "admin@example.com")


@pytest.fixture()
def owner_headers(app, client) -> dict[str, str]:
    create_user(app, name="Owner", email="owner@example.com")
    return login(client, "owner@example.com")


@pytest.fixture()
def other_headers(app, client) -> dict[str, str]:
    create_user(app, name="Other", email="other@example.com")
    return login(client, "other@example.com")


# ---------------------------------------------------------------------------
# Section catalog
# ---------------------------------------------------------------------------


@pytest.fixture()
def catalog(app) -> dict[str, Any]:
    """Header, hero and custom-category templates plus two variants.

    Returns plain ids so tests never hold ORM objects across contexts.
    """
    with app.app_context():
        creator_id = register_user(
            data={"name": "Catalog Admin", "email": "catalog@example.com", "password": PASSWORD},
            role=ROLE_ADMIN,
        ).id

        ids: dict[str, Any] = {}
        for slug, default_data in (
            ("header", {
                "title": "Acme",
                "menuItems": [{"label": "Home", "url": "#home"}],
                "ctaButton": {"label": "Start", "url": "#start"},
            }),
            ("hero", {
                "headline": "Default headline",
                "subheadline": "Default sub",
                "items": [1, 2, 3],
            }),
            ("custom", {"title": "Custom title", "content": "Custom body"}),
        ):
            category = SectionCategory(name=slug.title(), slug=slug)
            db.session.add(category)
            db.session.flush()

            template = SectionTemplate(
                name=f"{slug.title()} template",
                category_id=category.id,
                default_data=default_data,
                created_by=creator_id,
            )
            db.session.add(template)
            db.session.flush()
            ids[slug] = template.id
            ids[f"{slug}_category"] = category.id

        hero_variant = SectionVariant(
            section_id=ids["hero"],
            label="Loud",
            variant_data={"headline": "Variant headline"},
        )
        header_variant = SectionVariant(
            section_id=ids["header"],
            label="Transparent",
            variant_data={"transparent": True},
        )
        db.session.add_all([hero_variant, header_variant])
        db.session.commit()

        ids["hero_variant"] = hero_variant.id
        ids["header_variant"] = header_variant.id
        return ids


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------


def create_site(client, headers, name: str = "My Site", slug: str = "my-site") -> str:
    res = client.post("/api/sites", json={"name": name, "slug": slug}, headers=headers)
    assert res.status_code == 201, res.get_json()
    return res.get_json()["id"]


def add_section(client, headers, site_id: str, **body) -> dict[str, Any]:
    res = client.post(f"/api/sites/{site_id}/sections", json=body, headers=headers)
    assert res.status_code == 201, res.get_json()
    return res.get_json()

"""Category dispatch and markup for exported sections."""

from __future__ import annotations

import pytest

from sitebuilder.rendering.renderer import (
    SECTION_TEMPLATES,
    is_known_category,
    render_document,
    render_section,
)


HEADER = {
    "title": "Acme",
    "logo": "/uploads/logo.png",
    "menuItems": [
        {"label": "Home", "url": "#home"},
        {"label": "Pricing", "url": "#pricing"},
    ],
    "ctaButton": {"label": "Sign up", "url": "/signup"},
}


class TestHeader:
    def test_interpolates_title_menu_and_cta(self) -> None:
        html = render_section("header", HEADER)

        assert "<header" in html
        assert "Acme" in html
        assert 'href="#home"' in html and "Home" in html
        assert 'href="#pricing"' in html and "Pricing" in html
        assert 'href="/signup"' in html and "Sign up" in html
        assert 'src="/uploads/logo.png"' in html

    def test_optional_fields_render_nothing_when_absent(self) -> None:
        html = render_section("header", {"title": "Bare", "menuItems": []})

        assert "Bare" in html
        assert "<img" not in html
        assert "bg-indigo-600" not in html

    def test_null_menu_does_not_raise(self) -> None:
        html = render_section("header", {"title": "Nulls", "menuItems": None, "ctaButton": None})
        assert "Nulls" in html


class TestHero:
    def test_background_image_switches_text_colour(self) -> None:
        html = render_section("hero", {"headline": "Hi", "backgroundImage": "/bg.jpg"})

        assert 'src="/bg.jpg"' in html
        assert "text-white" in html

    def test_without_background_image(self) -> None:
        html = render_section("hero", {"headline": "Hi", "subheadline": "There"})

        assert "Background" not in html
        assert "text-white" not in html
        assert "Hi" in html and "There" in html

    def test_buttons(self) -> None:
        html = render_section("hero", {
            "headline": "Hi",
            "ctaButton": {"label": "Primary", "url": "#a"},
            "secondaryButton": {"label": "Secondary", "url": "#b"},
        })
        assert html.index("Primary") < html.index("Secondary")


def test_pricing_plans_and_highlight() -> None:
    html = render_section("pricing", {
        "title": "Plans",
        "plans": [
            {"title": "Basic", "price": "$9", "period": "monthly", "features": ["A", "B"]},
            {"title": "Pro", "price": "$19", "period": "monthly", "highlighted": True,
             "ctaButton": {"label": "Buy Pro", "url": "#pro"}},
        ],
    })

    assert "Basic" in html and "$9" in html and "/monthly" in html
    assert html.count("border-indigo-500 border-2") == 1
    assert 'href="#pro"' in html


def test_footer_splits_menu_into_two_columns() -> None:
    html = render_section("footer", {
        "companyName": "Acme",
        "menuItems": [
            {"label": "One", "url": "#1"},
            {"label": "Two", "url": "#2"},
            {"label": "Three", "url": "#3"},
        ],
        "copyright": "(c) Acme",
    })

    links, more = html.index(">Links<"), html.index(">More<")
    assert links < html.index(">One<") < html.index(">Two<") < more < html.index(">Three<")
    assert "(c) Acme" in html


def test_about_and_services_lists() -> None:
    about = render_section("about", {"title": "Us", "features": [{"title": "Fast", "description": "Very"}]})
    services = render_section("services", {"title": "Do", "services": [{"title": "Design", "description": "Web"}]})

    assert "Fast" in about and "Very" in about
    assert "Design" in services and "Web" in services


def test_faq_renders_questions_and_answers() -> None:
    html = render_section("faq", {"title": "FAQ", "faqs": [{"question": "Why?", "answer": "Because."}]})
    assert "Why?" in html and "Because." in html


@pytest.mark.parametrize("slug", sorted(SECTION_TEMPLATES))
def test_every_category_tolerates_empty_content(slug: str) -> None:
    assert isinstance(render_section(slug, {}), str)
    assert isinstance(render_section(slug, None), str)


def test_rendering_is_deterministic() -> None:
    assert render_section("header", HEADER) == render_section("header", HEADER)
    assert render_section("nope", {"title": "x"}) == render_section("nope", {"title": "x"})


def test_unknown_category_falls_back_to_generic_block() -> None:
    html = render_section("carousel-3d", {})

    assert not is_known_category("carousel-3d")
    assert "Section Title" in html
    assert "Section Content" in html


def test_generic_block_uses_title_and_content() -> None:
    html = render_section(None, {"title": "Hello", "content": "World"})

    assert "Hello" in html and "World" in html
    assert "Section Title" not in html


def test_explicit_nulls_render_as_absent() -> None:
    header = render_section("header", {"title": None, "logo": None, "menuItems": [{"label": None, "url": None}]})
    generic = render_section("custom", {"title": None, "content": None})

    assert "None" not in header
    assert "<img" not in header
    assert "Section Title" in generic and "Section Content" in generic


def test_values_are_interpolated_verbatim() -> None:
    html = render_section("custom", {"title": "<em>bold</em>", "content": "a & b"})

    assert "<em>bold</em>" in html
    assert "a & b" in html


def test_document_shell_wraps_fragments_in_order() -> None:
    html = render_document("My Site", ["<p>first</p>", "<p>second</p>"], css_url="https://cdn.example/tw.css")

    assert html.startswith("<!DOCTYPE html>")
    assert "<title>My Site</title>" in html
    assert 'href="https://cdn.example/tw.css"' in html
    assert html.index("first") < html.index("second") < html.index("</body>")

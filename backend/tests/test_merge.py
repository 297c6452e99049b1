"""Effective-content resolution: defaults < variant < customization."""

from __future__ import annotations

import copy
from types import SimpleNamespace

from sitebuilder.rendering.merge import effective_content, merge_content


DEFAULT = {
    "title": "Default title",
    "items": [1, 2, 3],
    "ctaButton": {"label": "Go", "url": "#go"},
}


def test_defaults_only_are_returned_unchanged() -> None:
    merged = merge_content(DEFAULT, None, None)

    assert merged == DEFAULT
    assert merged is not DEFAULT


def test_customization_wins_over_variant_and_default() -> None:
    merged = merge_content(
        {"title": "default"},
        {"title": "variant"},
        {"title": "custom"},
    )
    assert merged["title"] == "custom"


def test_variant_wins_when_no_customization() -> None:
    merged = merge_content({"title": "default"}, {"title": "variant"}, None)
    assert merged["title"] == "variant"


def test_merge_is_shallow() -> None:
    merged = merge_content(DEFAULT, None, {"items": [9]})
    assert merged["items"] == [9]

    merged = merge_content(DEFAULT, {"ctaButton": {"label": "Other"}}, None)
    assert merged["ctaButton"] == {"label": "Other"}


def test_later_sources_never_delete_keys() -> None:
    merged = merge_content(DEFAULT, {"extra": 1}, {"title": "Mine"})

    assert merged["items"] == [1, 2, 3]
    assert merged["extra"] == 1
    assert merged["title"] == "Mine"


def test_unknown_keys_pass_through() -> None:
    merged = merge_content({}, {"whatever": {"nested": True}}, {"another": None})
    assert merged == {"whatever": {"nested": True}, "another": None}


def test_inputs_are_not_mutated() -> None:
    default = copy.deepcopy(DEFAULT)
    variant = {"title": "variant"}
    custom = {"items": []}

    merge_content(default, variant, custom)

    assert default == DEFAULT
    assert variant == {"title": "variant"}
    assert custom == {"items": []}


def test_missing_default_is_treated_as_empty() -> None:
    assert merge_content(None, None, {"a": 1}) == {"a": 1}


def test_effective_content_reads_template_variant_and_custom_data() -> None:
    section = SimpleNamespace(
        template=SimpleNamespace(default_data={"title": "T", "body": "B"}),
        variant=SimpleNamespace(variant_data={"body": "V"}),
        custom_data={"title": "C"},
    )
    assert effective_content(section) == {"title": "C", "body": "V"}


def test_effective_content_without_variant() -> None:
    section = SimpleNamespace(
        template=SimpleNamespace(default_data={"title": "T"}),
        variant=None,
        custom_data=None,
    )
    assert effective_content(section) == {"title": "T"}

"""Request body validation helpers."""

from __future__ import annotations

import pytest

from sitebuilder.domain.exceptions import ValidationError
from sitebuilder.utils.validation import (
    as_bool,
    is_blank,
    is_numeric,
    is_sort_key,
    parse_json_field,
    parse_json_object,
    validate_body,
)


class TestParseJsonField:
    def test_parsed_values_pass_through(self) -> None:
        value = {"a": 1}
        assert parse_json_field(value, "default_data") is value

    def test_serialized_string_is_parsed(self) -> None:
        assert parse_json_field('{"a": [1, 2]}', "default_data") == {"a": [1, 2]}

    def test_invalid_json_is_reported_with_field_name(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            parse_json_field("{not json", "variant_data")

        assert excinfo.value.message == "Invalid JSON in variant_data"
        assert excinfo.value.errors[0]["param"] == "variant_data"

    def test_object_required(self) -> None:
        with pytest.raises(ValidationError):
            parse_json_object("[1, 2]", "default_data")


class TestValidateBody:
    def test_collects_every_failing_field(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            validate_body(
                {"name": "  ", "order": "abc"},
                required={"name": "Name is required", "slug": "Slug is required"},
                numeric={"order": "Order is required"},
            )

        params = [e["param"] for e in excinfo.value.errors]
        assert params == ["name", "slug", "order"]
        assert all(e["location"] == "body" for e in excinfo.value.errors)

    def test_valid_body_passes(self) -> None:
        validate_body({"name": "x", "order": "3"}, required={"name": "m"}, numeric={"order": "m"})


@pytest.mark.parametrize("value, expected", [
    (1, True), (2.5, True), ("3", True), ("-1.5", True),
    ("abc", False), (None, False), (True, False), ("nan", False), ([], False),
])
def test_is_numeric(value, expected) -> None:
    assert is_numeric(value) is expected


@pytest.mark.parametrize("value, expected", [
    (0, True), (-5, True), ("7", True), (4.0, True), (2 ** 31 - 1, True), (-(2 ** 31), True),
    (2 ** 31, False), (-(2 ** 31) - 1, False), (1e300, False), (10 ** 400, False),
    (1.5, False), ("abc", False), (None, False), (True, False),
])
def test_is_sort_key(value, expected) -> None:
    assert is_sort_key(value) is expected


def test_is_blank() -> None:
    assert is_blank(None) and is_blank("") and is_blank("   ") and is_blank({})
    assert not is_blank(0) and not is_blank("x") and not is_blank({"a": 1})


def test_as_bool() -> None:
    assert as_bool("true") and as_bool(True) and as_bool(1)
    assert not as_bool("false") and not as_bool(False) and not as_bool(0)

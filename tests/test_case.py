"""Tests for case conversion."""

import pytest

from multilities.text.case import (
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
    to_title_case,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("this-is-a-long-text", "thisIsALongText"),
        ("this_is_a_long_text", "thisIsALongText"),
        ("already camel", "already camel"),
        ("keep-UPPER", "keep-UPPER"),
        ("mixed_Case-rest", "mixed_CaseRest"),
        ("trailing-", "trailing-"),
        ("", ""),
    ],
)
def test_to_camel_case(text, expected):
    assert to_camel_case(text) == expected


def test_to_camel_case_leaves_rest_of_string_alone():
    assert to_camel_case("HTTP-server_LOG") == "HTTPServer_LOG"


def test_to_pascal_case():
    assert to_pascal_case("this-is-a-long-text") == "ThisIsALongText"
    assert to_pascal_case("ThisIsALongText") == "ThisIsALongText"
    assert to_pascal_case("") == ""


def test_to_kebab_case():
    assert to_kebab_case("ThisIsALongText") == "this-is-a-long-text"
    assert to_kebab_case("thisIsALongText") == "this-is-a-long-text"


def test_to_snake_case():
    assert to_snake_case("ThisIsALongText") == "this_is_a_long_text"
    assert to_snake_case("thisIsALongText") == "this_is_a_long_text"


def test_leading_separator_on_request():
    assert to_kebab_case("ThisIsALongText", leading_separator=True) == "-this-is-a-long-text"
    assert to_snake_case("ThisIsALongText", leading_separator=True) == "_this_is_a_long_text"


def test_existing_separators_are_not_handled():
    assert to_snake_case("already_snakeCase") == "already_snake_case"
    assert to_kebab_case("some-Text") == "some--text"


def test_to_title_case():
    assert to_title_case("this is a long text") == "This Is A Long Text"
    assert to_title_case("tHIS iS mIXED") == "This Is Mixed"
    assert to_title_case("  spaced   out ") == "  Spaced   Out "
    assert to_title_case("(quoted) words") == "(Quoted) Words"

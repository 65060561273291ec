"""Tests for mapping lookups."""

from multilities.utils.objects import get_key_by_value


def test_finds_key():
    assert get_key_by_value({"a": 1, "b": 2, "c": 3}, 2) == "b"


def test_first_key_wins():
    assert get_key_by_value({"a": 1, "b": 2, "c": 2}, 2) == "b"


def test_missing_value():
    assert get_key_by_value({"a": 1}, 4) is None
    assert get_key_by_value({}, None) is None


def test_strict_equality():
    assert get_key_by_value({"a": 1}, True) is None
    assert get_key_by_value({"a": True}, 1) is None
    assert get_key_by_value({"a": "1"}, 1) is None
    assert get_key_by_value({"a": None}, None) == "a"


def test_ints_and_floats_are_one_number_kind():
    assert get_key_by_value({"a": 1}, 1.0) == "a"
    assert get_key_by_value({"a": 2.0, "b": 2}, 2) == "a"
    assert get_key_by_value({"a": 1.0}, True) is None


def test_missing_value_is_logged(log_messages):
    get_key_by_value({"a": 1}, 4)
    assert log_messages

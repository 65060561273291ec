"""Tests for number and list formatting."""

from decimal import Decimal

import pytest

from multilities.text.pretty import prettify_array, prettify_number


class TestPrettifyNumber:
    @pytest.mark.parametrize(
        "number, expected",
        [
            (0, "0"),
            (123, "123"),
            (1234, "1,234"),
            (123456789, "123,456,789"),
            (1234567.5, "1,234,567.5"),
            (1234.0, "1,234"),
            (0.00001, "0.00001"),
            (Decimal("98765.4321"), "98,765.4321"),
        ],
    )
    def test_grouping(self, number, expected):
        assert prettify_number(number) == expected

    def test_custom_delimiters(self):
        assert prettify_number(123456789, 0, 0, ".", ",") == "123.456.789"
        assert prettify_number(123456789.123, 0, 0, ".", ",") == "123.456.789,123"
        assert prettify_number(1234567, delimiter_1000=" ") == "1 234 567"

    def test_negative_numbers(self):
        assert prettify_number(-123) == "-123"
        assert prettify_number(-1234567) == "-1,234,567"
        assert prettify_number(-12, pad_zero_length=5) == "-0012"

    def test_rounding(self):
        assert prettify_number(1234.5678, -2) == "1,234.57"
        assert prettify_number(1234.5638, -2) == "1,234.56"
        assert prettify_number(1.05, -1) == "1.1"
        assert prettify_number(1.0123, -2) == "1.01"

    def test_rounding_keeps_short_fractions(self):
        assert prettify_number(1.5, -2) == "1.5"
        assert prettify_number(1.25, -2) == "1.25"

    def test_rounding_carries_through_nines(self):
        assert prettify_number(123456789.999, -2, 0, ".", ",") == "123.456.790,0"
        assert prettify_number(0.96, -1) == "1.0"
        assert prettify_number(1.097, -2) == "1.10"

    def test_rounding_to_zero_fraction(self):
        assert prettify_number(1.0001, -2) == "1.0"

    def test_positive_round_keeps_fraction(self):
        assert prettify_number(1.23456, 2) == "1.23456"

    def test_non_finite(self):
        assert prettify_number(float("inf")) == "inf"
        assert prettify_number(float("-inf"), -2, 8) == "-inf"
        assert prettify_number(float("nan")) == "nan"
        assert prettify_number(Decimal("Infinity")) == "Infinity"

    def test_zero_padding(self):
        assert prettify_number(42, pad_zero_length=5) == "00042"
        assert prettify_number(1234, pad_zero_length=7) == "001,234"
        assert prettify_number(1234, pad_zero_length=2) == "1,234"


class TestPrettifyArray:
    def test_default_joint(self):
        assert prettify_array(["a", "b", "c"]) == "a, b, c"

    def test_empty_and_single(self):
        assert prettify_array([]) == ""
        assert prettify_array(["a"]) == "a"

    def test_custom_joints(self):
        assert prettify_array(["a", "b", "c"], " and ") == "a and b and c"
        assert prettify_array(["a", "b", "c"], " and ", " and also ") == "a and b and also c"
        assert prettify_array(["a", "b"], ", ", " or ") == "a or b"

    def test_non_string_items(self):
        assert prettify_array([1, 2, 3]) == "1, 2, 3"
        assert prettify_array((4,)) == "4"

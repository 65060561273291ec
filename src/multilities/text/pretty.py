"""
Human readable formatting of numbers and lists - no external dependencies.
"""

__all__ = [
    "prettify_number",
    "prettify_array",
]

from decimal import Decimal
from typing import Any, Optional, Sequence, Tuple, Union

from multilities.config import CONFIG
from multilities.text.chunks import split_every
from multilities.text.strings import pad

Number = Union[int, float, Decimal]


def _positional(number: Number) -> str:
    # str() switches to exponent notation for large and small floats
    if isinstance(number, float):
        if number.is_integer():
            return str(int(number))
        return format(Decimal(repr(number)), "f")
    if isinstance(number, Decimal):
        return format(number, "f")
    return str(number)


def _round_fraction(integer: str, fraction: str, digits: int) -> Tuple[str, str]:
    """Round the fraction digits half-up, carrying into the integer part."""
    if len(fraction) <= digits:
        return integer, fraction

    capped = fraction[:digits]
    if fraction[digits] >= "5":
        bumped = str(int(capped) + 1).zfill(digits)
        if len(bumped) > digits:
            integer = str(int(integer) + 1)
            bumped = bumped[1:]
        capped = bumped

    # All-zero fractions collapse to a single digit
    if capped.count("0") == len(capped):
        capped = "0"
    return integer, capped


def prettify_number(
    number: Number = 0,
    round: int = 0,
    pad_zero_length: int = 0,
    delimiter_1000: str = CONFIG["delimiter_1000"],
    delimiter_decimal: str = CONFIG["delimiter_decimal"],
) -> str:
    """
    Format a number with thousands and decimal delimiters.

    Args:
        number: Number to format
        round: If negative, round the fraction to ``-round`` digits;
               otherwise the fraction is kept as is
        pad_zero_length: Left-pad the result with zeros to this length
                         (the sign of a negative number stays in front)
        delimiter_1000: Separator between groups of three integer digits
        delimiter_decimal: Separator between integer and fraction

    Returns:
        The formatted number; NaN and infinities as ``str(number)``

    Example:
        >>> prettify_number(123456789)
        '123,456,789'
        >>> prettify_number(123456789.123, 0, 0, ".", ",")
        '123.456.789,123'
        >>> prettify_number(1234.5678, -2)
        '1,234.57'
        >>> prettify_number(123456789.999, -2, 0, ".", ",")
        '123.456.790,0'
        >>> prettify_number(42, pad_zero_length=5)
        '00042'
    """
    if isinstance(number, (float, Decimal)) and not Decimal(number).is_finite():
        return str(number)

    text = _positional(number)
    sign = ""
    if text.startswith("-"):
        sign, text = "-", text[1:]

    integer, _, fraction = text.partition(".")
    if fraction and round < 0:
        integer, fraction = _round_fraction(integer, fraction, -round)

    result = delimiter_1000.join(split_every(integer, 3, start_from_right=True))
    if fraction:
        result += delimiter_decimal + fraction
    return sign + pad(result, pad_zero_length - len(sign), "0")


def prettify_array(
    array: Sequence[Any],
    joint: str = CONFIG["array_joint"],
    special_last: Optional[str] = None,
) -> str:
    """
    Join the items of a sequence into a readable enumeration.

    Args:
        array: Items to join, rendered with ``str``
        joint: Separator between items
        special_last: Separator before the last item, defaults to ``joint``

    Returns:
        The joined items, "" for an empty sequence

    Example:
        >>> prettify_array(["a", "b", "c"])
        'a, b, c'
        >>> prettify_array(["a", "b", "c"], ", ", " and ")
        'a, b and c'
        >>> prettify_array([])
        ''
    """
    if not array:
        return ""
    if special_last is None:
        special_last = joint
    items = [str(item) for item in array]
    if len(items) == 1:
        return items[0]
    return joint.join(items[:-1]) + special_last + items[-1]

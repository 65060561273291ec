"""Round a number to its leading digit."""

__all__ = ["round_to_next_best"]

from decimal import Decimal
from typing import Union

Number = Union[int, float]


def round_to_next_best(
    number: Number,
    only_base_ten: bool = False,
    round_down: bool = True,
) -> Number:
    """
    Round a number to the next multiple of its leading power of ten.

    With ``e`` the magnitude of the number and ``d`` its leading digit,
    rounding down gives ``d * 10**e`` and rounding up ``(d + 1) * 10**e``.
    ``only_base_ten`` drops the leading digit, giving ``10**e`` and
    ``10**(e + 1)``. Purely fractional numbers follow the same rule, and the
    sign is kept. Integers stay integers; everything else comes back as float.
    NaN and infinities are returned unchanged.

    Example:
        >>> round_to_next_best(1234)
        1000
        >>> round_to_next_best(1234, round_down=False)
        2000
        >>> round_to_next_best(1234, True, False)
        10000
        >>> round_to_next_best(0.0123)
        0.01
        >>> round_to_next_best(0.0123, round_down=False)
        0.02
    """
    if number == 0:
        return number

    value = Decimal(repr(number)) if isinstance(number, float) else Decimal(number)
    if not value.is_finite():
        return number
    magnitude = abs(value)
    exponent = magnitude.adjusted()
    leading = magnitude.as_tuple().digits[0]

    if only_base_ten:
        multiplier = 1 if round_down else 10
    else:
        multiplier = leading if round_down else leading + 1

    result = Decimal(multiplier).scaleb(exponent).copy_sign(value)
    if isinstance(number, int) and exponent >= 0:
        return int(result)
    return float(result)

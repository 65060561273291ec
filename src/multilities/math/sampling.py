"""Uniform random integers."""

__all__ = ["fair_random"]

import random
from typing import Optional

from multilities.errors import InvalidArgumentError


def fair_random(min: int, max: int, rng: Optional[random.Random] = None) -> int:
    """
    Draw an integer from ``[min, max)``, every integer being equally likely.

    A single uniform draw from ``[0, 1)`` is mapped onto the integers by
    scanning their cumulative probability ``(i + 1 - min) / (max - min)``.
    Rounding a scaled float instead would give the bounds half the weight.

    Args:
        min: Lowest possible result
        max: Exclusive upper bound
        rng: Random source, defaults to the ``random`` module

    Raises:
        InvalidArgumentError: If the range is empty

    Example:
        >>> fair_random(2, 5) in (2, 3, 4)
        True
    """
    if max <= min:
        raise InvalidArgumentError("max", max, f"must be greater than min={min!r}")

    r = (rng or random).random()
    span = max - min
    for i in range(min, max - 1):
        if r < (i + 1 - min) / span:
            return i
    return max - 1

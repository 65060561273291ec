"""Range membership test."""

__all__ = ["is_between"]

from typing import Any


def is_between(
    min: Any,
    x: Any,
    max: Any,
    start_incl: bool = True,
    end_incl: bool = False,
) -> bool:
    """Check ``min <= x < max``, with the inclusivity of each bound toggleable."""
    above = x >= min if start_incl else x > min
    below = x <= max if end_incl else x < max
    return above and below

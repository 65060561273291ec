"""
Math utilities subpackage - no external dependencies.

Range checks, uniform random integers and leading-digit rounding.
"""

from multilities.math.ranges import is_between
from multilities.math.sampling import fair_random
from multilities.math.rounding import round_to_next_best

__all__ = [
    "is_between",
    "fair_random",
    "round_to_next_best",
]

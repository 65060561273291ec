"""Exceptions raised when a caller breaks an argument contract."""

__all__ = ["InvalidArgumentError"]

from typing import Any


class InvalidArgumentError(ValueError):
    """
    An argument is outside the range the function is defined for.

    Unparseable input (a malformed hex color, a missing key) is reported with
    a ``None`` return instead; this error is reserved for contract violations
    such as a chunk length of zero or an empty random range.

    Example:
        >>> raise InvalidArgumentError("length", 0, "must be positive")
        Traceback (most recent call last):
        ...
        multilities.errors.InvalidArgumentError: length=0: must be positive
    """

    def __init__(self, name: str, value: Any, reason: str):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"{name}={value!r}: {reason}")

"""Reverse lookup in mappings."""

__all__ = ["get_key_by_value"]

from typing import Any, Hashable, Mapping, Optional

from loguru import logger


def _kind(value: Any) -> type:
    # int and float share one numeric kind; bool stays apart
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float
    return type(value)


def get_key_by_value(mapping: Mapping[Hashable, Any], value: Any) -> Optional[Hashable]:
    """
    Return the first key whose value strictly equals ``value``.

    Values of a different kind never match, so ``1`` does not find ``True``
    and ``"1"`` does not find ``1``. Integers and floats count as one number
    kind, so ``1.0`` finds ``1``.

    Example:
        >>> get_key_by_value({"a": 1, "b": 2, "c": 3}, 2)
        'b'
        >>> get_key_by_value({"a": 1, "b": 2, "c": 3}, 4) is None
        True
    """
    kind = _kind(value)
    for key, candidate in mapping.items():
        if _kind(candidate) is kind and candidate == value:
            return key
    logger.debug(f"No key maps to {value!r}")
    return None

"""
Case conversion utilities - no external dependencies.

Regex based conversions between camelCase, PascalCase, kebab-case,
snake_case and Title Case. Only ASCII letters are treated as case boundaries.
"""

__all__ = [
    "to_camel_case",
    "to_pascal_case",
    "to_kebab_case",
    "to_snake_case",
    "to_title_case",
]

import re

_SEPARATED_LOWER = re.compile(r"[-_]([a-z])")
_LEADING_LOWER = re.compile(r"^[a-z]")
_UPPER = re.compile(r"[A-Z]")
_WORD = re.compile(r"\w\S*")


def to_camel_case(text: str) -> str:
    """
    Convert kebab-case or snake_case text to camelCase.

    Each ``-`` or ``_`` followed by a lowercase letter is dropped and the
    letter uppercased. Nothing else is touched, so the rest of the string
    keeps its case.

    Args:
        text: Text to convert

    Returns:
        Converted text

    Example:
        >>> to_camel_case("this-is-a-long-text")
        'thisIsALongText'
        >>> to_camel_case("this_is_a_long_text")
        'thisIsALongText'
    """
    return _SEPARATED_LOWER.sub(lambda m: m.group(1).upper(), text)


def to_pascal_case(text: str) -> str:
    """
    Convert kebab-case or snake_case text to PascalCase.

    Example:
        >>> to_pascal_case("this-is-a-long-text")
        'ThisIsALongText'
    """
    return _LEADING_LOWER.sub(lambda m: m.group(0).upper(), to_camel_case(text))


def _separate_upper(text: str, separator: str, leading_separator: bool) -> str:
    converted = _UPPER.sub(lambda m: separator + m.group(0).lower(), text)
    if not leading_separator and _UPPER.match(text):
        return converted[len(separator) :]
    return converted


def to_kebab_case(text: str, leading_separator: bool = False) -> str:
    """
    Convert camelCase or PascalCase text to kebab-case.

    A ``-`` is inserted before every uppercase letter, which is lowercased.
    Existing separators are left alone.

    Args:
        text: Text to convert
        leading_separator: Keep the ``-`` produced by a leading uppercase letter

    Returns:
        Converted text

    Example:
        >>> to_kebab_case("ThisIsALongText")
        'this-is-a-long-text'
        >>> to_kebab_case("ThisIsALongText", leading_separator=True)
        '-this-is-a-long-text'
    """
    return _separate_upper(text, "-", leading_separator)


def to_snake_case(text: str, leading_separator: bool = False) -> str:
    """
    Convert camelCase or PascalCase text to snake_case.

    Example:
        >>> to_snake_case("ThisIsALongText")
        'this_is_a_long_text'
    """
    return _separate_upper(text, "_", leading_separator)


def to_title_case(text: str) -> str:
    """
    Uppercase the first letter of every word and lowercase the rest of it.

    A word starts at a word character and runs up to the next whitespace.

    Example:
        >>> to_title_case("this is a LONG text")
        'This Is A Long Text'
    """
    return _WORD.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), text)

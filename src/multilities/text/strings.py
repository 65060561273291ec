"""
Pure text utilities - no external dependencies.

Functions for counting, splitting, reversing, truncating, abbreviating and
padding strings.
"""

__all__ = [
    "count",
    "rsplit",
    "reverse",
    "truncate",
    "remove_last_word",
    "cap_text",
    "derive_abbr",
    "pad",
]

from multilities.config import CONFIG
from multilities.errors import InvalidArgumentError


def count(text: str, occurrence: str, allow_overlapping: bool = False) -> int:
    """
    Count the occurrences of a substring.

    Args:
        text: Text to search
        occurrence: Substring to look for (case sensitive)
        allow_overlapping: Count matches that overlap each other

    Returns:
        Number of occurrences

    Raises:
        InvalidArgumentError: If occurrence is empty

    Example:
        >>> count("This is a long text", "i")
        2
        >>> count("aaaa", "aa")
        2
        >>> count("aaaa", "aa", allow_overlapping=True)
        3
    """
    if not occurrence:
        raise InvalidArgumentError("occurrence", occurrence, "must not be empty")

    step = 1 if allow_overlapping else len(occurrence)
    n = 0
    pos = text.find(occurrence)
    while pos >= 0:
        n += 1
        pos = text.find(occurrence, pos + step)
    return n


def rsplit(text: str, delimiter: str = " ") -> list[str]:
    """
    Split text on a delimiter, returning the pieces right to left.

    Example:
        >>> rsplit("This is a long text")
        ['text', 'long', 'a', 'is', 'This']
    """
    return text.split(delimiter)[::-1]


def reverse(text: str, every: int = 1) -> str:
    """
    Reverse text, optionally in blocks of ``every`` characters.

    Blocks are cut from the left, so a short trailing block becomes the first
    one after reversal.

    Example:
        >>> reverse("123456789")
        '987654321'
        >>> reverse("123456789", 3)
        '789456123'
    """
    if every <= 0:
        raise InvalidArgumentError("every", every, "must be positive")
    blocks = [text[i : i + every] for i in range(0, len(text), every)]
    return "".join(reversed(blocks))


def truncate(text: str, max_length: int, suffix: str = CONFIG["ellipsis_hard"]) -> str:
    """
    Truncate text to max_length, adding suffix if truncated.

    Args:
        text: Text to truncate
        max_length: Maximum length including suffix
        suffix: Suffix to add if truncated

    Returns:
        Truncated text with suffix, or original if short enough

    Example:
        >>> truncate("Hello World", 8)
        'Hello...'
    """
    if len(text) <= max_length:
        return text
    return text[: max(max_length - len(suffix), 0)] + suffix


def remove_last_word(text: str, min_length: int = 1) -> str:
    """
    Drop the trailing word of the text.

    The cut happens at the last space found before ``len(text) - min_length``,
    so a tail shorter than ``min_length`` never counts as a word on its own.
    The space itself is removed too.

    Args:
        text: Text to shorten
        min_length: Minimum length of the trailing run to be treated as a word

    Returns:
        Text without its last word, or "" if no space precedes it

    Example:
        >>> remove_last_word("This is a long text")
        'This is a long'
        >>> remove_last_word("This is a", 3)
        'This'
    """
    cut = text.rfind(" ", 0, max(len(text) - min_length, 0))
    return text[:cut] if cut >= 0 else ""


def cap_text(text: str, max_length: int, clean_cut: bool = True) -> str:
    """
    Cap text to ``max_length`` characters, marking the cut with an ellipsis.

    Args:
        text: Text to cap
        max_length: Length from which text gets cut
        clean_cut: Cut back to the previous word boundary and append " ...",
                   otherwise cut mid-word and append "..."

    Returns:
        The original text if it fits, else the capped text

    Example:
        >>> cap_text("This is a long text", 10)
        'This ...'
        >>> cap_text("This is a long text", 10, clean_cut=False)
        'This is...'
        >>> cap_text("Short", 10)
        'Short'
    """
    if len(text) <= max_length:
        return text
    if not clean_cut:
        return truncate(text, max_length)
    return remove_last_word(text[:max_length], CONFIG["clean_cut_min_word"]) + CONFIG["ellipsis_clean"]


def derive_abbr(text: str, length: int, default_abbr: str = "") -> str:
    """
    Derive an abbreviation of ``length`` letters from the text.

    With at least ``length`` words the initials of the first ``length`` words
    are used. With fewer words the letters are spread over all words, the
    first ``length % word_count`` words giving one letter more.

    Args:
        text: Text to abbreviate, words separated by single spaces
        length: Number of letters wanted
        default_abbr: Returned when length is 0 or the text is too short

    Returns:
        The abbreviation

    Example:
        >>> derive_abbr("This is a long text", 3)
        'Tia'
        >>> derive_abbr("Portable Network Graphics", 3)
        'PNG'
        >>> derive_abbr("Hello World", 5)
        'HelWo'
        >>> derive_abbr("Hi", 3, "N/A")
        'N/A'
    """
    if length == 0 or len(text) < length:
        return default_abbr

    words = text.split(" ")
    if len(words) >= length:
        return "".join(word[:1] for word in words[:length])

    size, extra = divmod(length, len(words))
    return "".join(word[: size + 1 if i < extra else size] for i, word in enumerate(words))


def pad(text: str, length: int, char: str) -> str:
    """
    Left-pad text by prepending ``char`` until it is at least ``length`` long.

    A multi-character ``char`` is prepended whole each time, so the result
    can end up longer than ``length``.

    Example:
        >>> pad("123", 5, "0")
        '00123'
        >>> pad("123", 5, "abc")
        'abc123'
        >>> pad("123", 3, "0")
        '123'
    """
    if len(text) < length and not char:
        raise InvalidArgumentError("char", char, "must not be empty")
    while len(text) < length:
        text = char + text
    return text

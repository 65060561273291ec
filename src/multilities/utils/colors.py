"""
Color conversion utilities.

Pure functions for color format conversions (hex, RGB, RGBA, HSL) and for
picking a readable text color on a given background.
"""

__all__ = [
    "RGB",
    "RGBA",
    "HSL",
    "hex_to_rgb",
    "hex_to_rgba",
    "rgb_to_hex",
    "rgb_to_hsl",
    "get_contrast",
]

import colorsys
import re
from typing import Optional, TypedDict

from loguru import logger

from multilities.config import CONFIG
from multilities.errors import InvalidArgumentError

_HEX_DIGITS = re.compile(r"#?([0-9a-fA-F]+)")


class RGB(TypedDict):
    """Color channels from 0 to 255."""

    r: int
    g: int
    b: int


class RGBA(TypedDict):
    """Color channels from 0 to 255, alpha is None when the source had none."""

    r: int
    g: int
    b: int
    a: Optional[int]


class HSL(TypedDict):
    """Hue, saturation and lightness as fractions of 1."""

    h: float
    s: float
    l: float


def _hex_bytes(hex_color: str, lengths: tuple[int, ...]) -> Optional[list[int]]:
    """Parse hex digits into bytes, doubling each digit of shorthand forms."""
    match = _HEX_DIGITS.fullmatch(hex_color)
    if not match or len(match.group(1)) not in lengths:
        logger.debug(f"Not a {'/'.join(map(str, lengths))}-digit hex color: {hex_color!r}")
        return None

    digits = match.group(1)
    if len(digits) in (3, 4):
        digits = "".join(d * 2 for d in digits)
    return [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]


def hex_to_rgb(hex_color: str) -> Optional[RGB]:
    """
    Convert hex color to RGB channels (0-255).

    Args:
        hex_color: 3- or 6-digit hex color, with or without "#"

    Returns:
        Channels as {"r", "g", "b"}, or None if the string is not such a color

    Example:
        >>> hex_to_rgb("#ff8000")
        {'r': 255, 'g': 128, 'b': 0}
        >>> hex_to_rgb("F00")
        {'r': 255, 'g': 0, 'b': 0}
        >>> hex_to_rgb("red") is None
        True
    """
    channels = _hex_bytes(hex_color, (3, 6))
    if channels is None:
        return None
    r, g, b = channels
    return RGB(r=r, g=g, b=b)


def hex_to_rgba(hex_color: str) -> Optional[RGBA]:
    """
    Convert hex color with optional alpha channel to RGBA channels.

    Args:
        hex_color: 3-, 4-, 6- or 8-digit hex color, with or without "#".
                   The 3- and 6-digit forms carry no alpha.

    Returns:
        Channels as {"r", "g", "b", "a"}, alpha None for colors without
        alpha channel, or None for unsupported input

    Example:
        >>> hex_to_rgba("#ff800080")
        {'r': 255, 'g': 128, 'b': 0, 'a': 128}
        >>> hex_to_rgba("#f80")
        {'r': 255, 'g': 136, 'b': 0, 'a': None}
    """
    channels = _hex_bytes(hex_color, (3, 4, 6, 8))
    if channels is None:
        return None
    r, g, b, a = channels if len(channels) == 4 else (*channels, None)
    return RGBA(r=r, g=g, b=b, a=a)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """
    Convert RGB channels to a "#rrggbb" hex color.

    Raises:
        InvalidArgumentError: If a channel is outside 0-255

    Example:
        >>> rgb_to_hex(255, 128, 0)
        '#ff8000'
    """
    for name, value in (("r", r), ("g", g), ("b", b)):
        if not 0 <= value <= 255:
            raise InvalidArgumentError(name, value, "must be within 0-255")
    return "#" + format((1 << 24) + (r << 16) + (g << 8) + b, "x")[1:]


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """
    Convert RGB channels (0-255) to hue, saturation and lightness.

    Example:
        >>> rgb_to_hsl(255, 0, 0)
        {'h': 0.0, 's': 1.0, 'l': 0.5}
    """
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return HSL(h=h, s=s, l=l)


def get_contrast(
    hex_color: str,
    threshold: float = CONFIG["contrast_threshold"],
) -> Optional[str]:
    """
    Pick black or white text for the given background color.

    The perceived luminance ``0.299 r + 0.587 g + 0.114 b`` is compared with
    the threshold: brighter backgrounds get black, darker ones white.

    Args:
        hex_color: Background as 3- or 6-digit hex color
        threshold: Luminance (0-255) above which black is returned

    Returns:
        "#000000" or "#FFFFFF", or None if the color cannot be parsed

    Example:
        >>> get_contrast("#000000")
        '#FFFFFF'
        >>> get_contrast("#FFFF00")
        '#000000'
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    wr, wg, wb = CONFIG["luminance_weights"]
    luminance = wr * rgb["r"] + wg * rgb["g"] + wb * rgb["b"]
    return CONFIG["contrast_dark"] if luminance > threshold else CONFIG["contrast_light"]

"""
Utilities subpackage - colors and mapping lookups.
"""

from multilities.utils.colors import (
    RGB,
    RGBA,
    HSL,
    hex_to_rgb,
    hex_to_rgba,
    rgb_to_hex,
    rgb_to_hsl,
    get_contrast,
)

from multilities.utils.objects import get_key_by_value

__all__ = [
    # colors
    "RGB",
    "RGBA",
    "HSL",
    "hex_to_rgb",
    "hex_to_rgba",
    "rgb_to_hex",
    "rgb_to_hsl",
    "get_contrast",
    # objects
    "get_key_by_value",
]

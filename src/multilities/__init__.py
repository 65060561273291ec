"""
multilities - Small, stateless helpers for text, numbers and colors.

This package is organized into focused subpackages:

- text/     Pure text utilities (no dependencies)
            - case: to_camel_case, to_pascal_case, to_kebab_case, to_snake_case, to_title_case
            - chunks: split_every, split_equally
            - strings: count, rsplit, reverse, truncate, remove_last_word, cap_text, derive_abbr, pad
            - pretty: prettify_number, prettify_array

- math/     Numeric helpers (no dependencies)
            - ranges: is_between
            - sampling: fair_random
            - rounding: round_to_next_best

- utils/    Colors and mappings (loguru for debug output)
            - colors: hex_to_rgb, hex_to_rgba, rgb_to_hex, rgb_to_hsl, get_contrast
            - objects: get_key_by_value

Unparseable input yields None; broken argument contracts raise
multilities.errors.InvalidArgumentError. Logging is disabled until a caller
runs logger.enable("multilities") or uses the command line.

Usage:
    from multilities.text import cap_text, prettify_number
    from multilities.utils import hex_to_rgb, get_contrast
    from multilities.math import fair_random
"""

__version__ = "0.0.1"

from loguru import logger

from multilities.errors import InvalidArgumentError

from multilities.text import (
    to_camel_case,
    to_pascal_case,
    to_kebab_case,
    to_snake_case,
    to_title_case,
    split_every,
    split_equally,
    count,
    rsplit,
    reverse,
    truncate,
    remove_last_word,
    cap_text,
    derive_abbr,
    pad,
    prettify_number,
    prettify_array,
)

from multilities.math import (
    is_between,
    fair_random,
    round_to_next_best,
)

from multilities.utils import (
    RGB,
    RGBA,
    HSL,
    hex_to_rgb,
    hex_to_rgba,
    rgb_to_hex,
    rgb_to_hsl,
    get_contrast,
    get_key_by_value,
)

logger.disable("multilities")

__all__ = [
    "__version__",
    "InvalidArgumentError",
    # text.case
    "to_camel_case",
    "to_pascal_case",
    "to_kebab_case",
    "to_snake_case",
    "to_title_case",
    # text.chunks
    "split_every",
    "split_equally",
    # text.strings
    "count",
    "rsplit",
    "reverse",
    "truncate",
    "remove_last_word",
    "cap_text",
    "derive_abbr",
    "pad",
    # text.pretty
    "prettify_number",
    "prettify_array",
    # math
    "is_between",
    "fair_random",
    "round_to_next_best",
    # utils.colors
    "RGB",
    "RGBA",
    "HSL",
    "hex_to_rgb",
    "hex_to_rgba",
    "rgb_to_hex",
    "rgb_to_hsl",
    "get_contrast",
    # utils.objects
    "get_key_by_value",
]

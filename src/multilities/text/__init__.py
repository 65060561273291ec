"""
Text utilities subpackage - no external dependencies.

Pure functions for case conversion, chunking, truncation and formatting.
"""

from multilities.text.case import (
    to_camel_case,
    to_pascal_case,
    to_kebab_case,
    to_snake_case,
    to_title_case,
)

from multilities.text.chunks import (
    split_every,
    split_equally,
)

from multilities.text.strings import (
    count,
    rsplit,
    reverse,
    truncate,
    remove_last_word,
    cap_text,
    derive_abbr,
    pad,
)

from multilities.text.pretty import (
    prettify_number,
    prettify_array,
)

__all__ = [
    # case
    "to_camel_case",
    "to_pascal_case",
    "to_kebab_case",
    "to_snake_case",
    "to_title_case",
    # chunks
    "split_every",
    "split_equally",
    # strings
    "count",
    "rsplit",
    "reverse",
    "truncate",
    "remove_last_word",
    "cap_text",
    "derive_abbr",
    "pad",
    # pretty
    "prettify_number",
    "prettify_array",
]

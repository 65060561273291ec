"""
Library defaults.

All default separators, thresholds and logging settings are centralized here
so the helpers and the command line agree on them.
"""

__all__ = ["CONFIG"]

from typing import Any, Dict

# ====================================================================
# LIBRARY CONFIGURATION
# ====================================================================

CONFIG: Dict[str, Any] = {
    # Text truncation
    "ellipsis_clean": " ...",  # Appended after a cut on a word boundary
    "ellipsis_hard": "...",  # Appended after a cut mid-word
    "clean_cut_min_word": 3,  # Shortest tail still treated as a word when cutting cleanly
    # Number / list formatting
    "delimiter_1000": ",",
    "delimiter_decimal": ".",
    "array_joint": ", ",
    # Colors
    "contrast_threshold": 150,  # Perceived luminance (0-255) above which text should be dark
    "luminance_weights": (0.299, 0.587, 0.114),  # ITU-R BT.601 luma coefficients
    "contrast_dark": "#000000",
    "contrast_light": "#FFFFFF",
    # Logging (used by the command line)
    "log_level": "WARNING",
    "log_format": "<level>{level: <8}</level> | {name}:{function} - {message}",
}

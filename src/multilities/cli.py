"""
Command line access to the helpers.

Every public helper is a subcommand; arguments are parsed by fire:
    multilities to_camel_case this-is-a-long-text
    multilities prettify_number 1234567.891 --round=-2
    multilities hex_to_rgb "#F00" --log_level=DEBUG
"""

__all__ = ["Multilities", "configure_logging", "main"]

import sys
from typing import Any, List, Optional

import fire
from loguru import logger

from multilities import math, text, utils
from multilities.config import CONFIG


def configure_logging(level: str = CONFIG["log_level"]) -> None:
    """Send library log records to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=str(level).upper(), format=CONFIG["log_format"])
    logger.enable("multilities")


class Multilities:
    """String, number and color helpers."""

    def __init__(self, log_level: str = CONFIG["log_level"]):
        configure_logging(log_level)
        logger.debug(f"Logging configured at {log_level}")
        for module in (text, math, utils):
            for name in module.__all__:
                member = getattr(module, name)
                # Result types are not commands
                if callable(member) and not isinstance(member, type):
                    setattr(self, name, member)


def main(argv: Optional[List[str]] = None) -> Any:
    """Run the command line; argv defaults to sys.argv."""
    return fire.Fire(Multilities, command=argv, name="multilities")

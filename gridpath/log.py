# gridpath/log.py
#!/usr/bin/env python3
"""Console logging for gridpath.

Colour-tagged ``print`` output. Set ``GRIDPATH_NO_COLOR`` to get plain text and
``GRIDPATH_DEBUG`` to see per-request debug lines.
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # debug / per-request detail
    YELLOW = "\033[93m"    # dropped or rejected input
    RED = "\033[91m"       # fatal errors
    CYAN = "\033[96m"      # info

    BOLD = "\033[1m"
    RESET = "\033[0m"


TAG_DEBUG = "[.]"
TAG_INFO = "[i]"
TAG_WARN = "[~]"
TAG_ERROR = "[!]"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes unless GRIDPATH_NO_COLOR is set."""
    if os.getenv("GRIDPATH_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def debug_enabled() -> bool:
    return bool(os.getenv("GRIDPATH_DEBUG"))


def log_debug(message: str) -> None:
    if debug_enabled():
        print(colored(f"{TAG_DEBUG} {message}", Color.BLUE))


def log_info(message: str) -> None:
    print(colored(f"{TAG_INFO} {message}", Color.CYAN))


def log_warn(message: str) -> None:
    print(colored(f"{TAG_WARN} {message}", Color.YELLOW))


def log_error(message: str) -> None:
    print(colored(f"{TAG_ERROR} {message}", Color.RED, bold=True))

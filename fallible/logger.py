from __future__ import annotations

"""Console logging with colored output for the fallible command line tools."""

import os
from enum import Enum


class Color(str, Enum):
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    BLUE = "\033[34m"
    CYAN = "\033[36m"


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() not in ("", "0", "false", "no")


_settings = {
    "verbose": _env_flag("FALLIBLE_VERBOSE"),
    "color": "NO_COLOR" not in os.environ,
}


def configure(verbose: bool | None = None, color: bool | None = None) -> None:
    """Update the logging settings.

    Args:
        verbose: Print debug messages when True.
        color: Wrap messages in ANSI color codes when True.
    """
    if verbose is not None:
        _settings["verbose"] = verbose
    if color is not None:
        _settings["color"] = color


def paint(text: str, color: Color) -> str:
    """Return the given text wrapped in ANSI color codes.

    Args:
        text: The text to colorize.
        color: The color to apply.

    Returns:
        The colorized text, or ``text`` unchanged when color is disabled.
    """
    if not _settings["color"]:
        return text
    return f"{color.value}{text}{Color.RESET.value}"


def log_info(msg: str) -> None:
    """Log an informational message."""
    print(paint(f"[INFO] {msg}", Color.BLUE))


def log_ok(msg: str) -> None:
    """Log a success message."""
    print(paint(f"[OK] {msg}", Color.GREEN))


def log_err(msg: str) -> None:
    """Log an error message."""
    print(paint(f"[ERR] {msg}", Color.RED))


def log_debug(msg: str) -> None:
    """Log a debug message, only in verbose mode."""
    if _settings["verbose"]:
        print(paint(f"[DEBUG] {msg}", Color.CYAN))

"""Levelled, optionally coloured console logging."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

KNRM = "\x1b[0m"
KRED = "\x1b[31m"
KGRN = "\x1b[32m"
KYEL = "\x1b[33m"
KBLU = "\x1b[34m"
KMAG = "\x1b[35m"
KCYN = "\x1b[36m"
KWHT = "\x1b[37m"


class LogLevel(IntEnum):
    """Logging levels; a message is shown when the configured level is at least its own."""

    ERR = 0
    QUIET = 1
    WARN = 2
    INFO = 3


_STYLES = {
    LogLevel.INFO: (KGRN, "Info"),
    LogLevel.WARN: (KYEL, "Warning"),
    LogLevel.ERR: (KRED, "Error"),
}


def format_log_line(level: LogLevel, message: str, colored: bool = False) -> str:
    """Return ``message`` decorated with the prefix (and colour) for ``level``."""
    style = _STYLES.get(level)
    if style is None:
        return message
    color, prefix = style
    if colored:
        return f"{color}[{prefix}] - {message}{KNRM}"
    return f"[{prefix}] - {message}"


def log(
    level: LogLevel,
    message: str,
    current_level: LogLevel = LogLevel.INFO,
    colored: bool = False,
    stream: TextIO | None = None,
) -> bool:
    """Write ``message`` if ``current_level`` lets it through; return whether it was written.

    Info goes to stdout, warnings and errors to stderr unless ``stream`` is given.
    """
    if current_level == LogLevel.QUIET:
        return False

    if level in _STYLES:
        if current_level < level:
            return False
        target = stream or (sys.stdout if level == LogLevel.INFO else sys.stderr)
    else:
        target = stream or sys.stdout

    target.write(format_log_line(level, message, colored) + "\n")
    return True
"""
Severity levels.

Levels are plain integers ordered by severity. The named levels are spaced
four apart so that custom levels can sit between them.
"""

from __future__ import annotations

import logging
import re
from enum import IntEnum


class Level(IntEnum):
    """Named severity levels."""

    DEBUG = -4
    INFO = 0
    WARN = 4
    ERROR = 8


_ALIASES = {
    "WARNING": int(Level.WARN),
    "CRITICAL": int(Level.ERROR) + 4,
    "FATAL": int(Level.ERROR) + 4,
}

_LEVEL_TEXT = re.compile(r"^([A-Za-z]+)\s*([+-]\d+)?$")


def level_name(level: int) -> str:
    """
    Return the upper-case display name for a level.

    Levels between the named ones render as the nearest lower named level
    with a signed offset, e.g. ``INFO+2`` or ``DEBUG-1``.

    Args:
        level: Any integer severity.

    Returns:
        The display name used in formatted output.
    """
    level = int(level)
    if level < Level.INFO:
        base = Level.DEBUG
    elif level < Level.WARN:
        base = Level.INFO
    elif level < Level.ERROR:
        base = Level.WARN
    else:
        base = Level.ERROR

    offset = level - base
    if offset == 0:
        return base.name
    return f"{base.name}{offset:+d}"


def resolve_level(level: str | int) -> int:
    """
    Convert a level name or integer to an integer level.

    Accepts ``"info"``, ``"WARN"``, ``"warning"``, ``"ERROR+2"`` and so on.

    Raises:
        ValueError: If the string does not name a level.
    """
    if isinstance(level, int):
        return int(level)

    match = _LEVEL_TEXT.match(level.strip())
    if match is None:
        raise ValueError(f"Unknown log level: {level!r}")

    name = match.group(1).upper()
    if name in Level.__members__:
        base = int(Level[name])
    elif name in _ALIASES:
        base = _ALIASES[name]
    else:
        raise ValueError(f"Unknown log level: {level!r}")

    offset = match.group(2)
    return base + int(offset) if offset else base


def from_stdlib_level(levelno: int) -> int:
    """Map a stdlib ``logging`` level number onto this scale (INFO -> 0, WARNING -> 4)."""
    return (levelno - logging.INFO) * 4 // 10

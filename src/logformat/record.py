"""
Log records.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from logformat.attrs import Attr


@dataclass(frozen=True)
class Record:
    """
    A single log event.

    Args:
        time: When the event happened. Rendered in its own timezone.
        level: Integer severity (see ``logformat.levels``).
        message: The log message.
        attrs: Per-event attributes, rendered before the sink's fixed ones.
    """

    time: datetime
    level: int
    message: str
    attrs: tuple[Attr, ...] = ()

"""
Configuration for LineSink.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from logformat.attrs import Attr
from logformat.levels import Level

# strftime equivalent of YYYY/MM/DD hh:mm:ss, e.g. 2025/01/11 12:00:00
DEFAULT_TIME_FORMAT = "%Y/%m/%d %H:%M:%S"


@dataclass(frozen=True)
class SinkConfig:
    """
    Per-sink configuration snapshot.

    Every derived sink gets its own copy; nothing here changes after
    construction.

    Args:
        threshold: Minimum level a record needs to be written.
        time_format: strftime pattern for the timestamp (default DEFAULT_TIME_FORMAT).
        group: Optional label rendered as ``[group]`` before the message.
        attrs: Fixed attributes appended to every line, in order.
    """

    threshold: int = Level.INFO
    time_format: str = DEFAULT_TIME_FORMAT
    group: str = ""
    attrs: tuple[Attr, ...] = ()

    def __post_init__(self) -> None:
        if not self.time_format:
            object.__setattr__(self, "time_format", DEFAULT_TIME_FORMAT)

    def extend(self, attrs: Iterable[Attr]) -> SinkConfig:
        """Return a copy with ``attrs`` appended to the fixed attributes."""
        return replace(self, attrs=self.attrs + tuple(attrs))

    def regroup(self, group: str) -> SinkConfig:
        """Return a copy whose group label is replaced by ``group``."""
        return replace(self, group=group)

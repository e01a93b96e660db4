"""
LineSink: filters, formats and writes log records.

A root sink is created with ``new_sink``. ``with_attrs`` and ``with_group``
derive new sinks that share the root's destination and lock, so every
sink in one family writes whole lines without interleaving.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from logformat.attrs import Attr
from logformat.config import SinkConfig
from logformat.destinations.base import Destination
from logformat.formatter import format_record
from logformat.levels import resolve_level
from logformat.record import Record

_log = logging.getLogger(__name__)


class LogWriteError(OSError):
    """Raised when the destination fails to accept a formatted line."""


class SharedOutput:
    """
    A destination and the lock that guards it.

    One instance is shared by a root sink and all sinks derived from it.
    """

    def __init__(self, destination: Destination) -> None:
        self.destination = destination
        self._lock = threading.Lock()

    def write(self, data: bytes) -> None:
        """
        Write ``data`` to the destination while holding the lock.

        Raises:
            LogWriteError: If the destination raises or reports a short write.
        """
        with self._lock:
            try:
                written = self.destination.write(data)
            except (OSError, ValueError) as exc:
                raise LogWriteError(f"failed to write log: {exc}") from exc

        if written is not None and written < len(data):
            raise LogWriteError(f"failed to write log: short write ({written} of {len(data)} bytes)")


class LineSink:
    """
    Write records at or above a threshold as single formatted lines.

    Instances are immutable. Use ``new_sink`` to create a root sink and
    ``with_attrs``/``with_group`` to derive from it.

    Args:
        config: The configuration snapshot for this sink.
        output: The destination/lock pair shared with related sinks.

    Example::

        sink = new_sink(Level.INFO, StreamDestination(sys.stdout))
        api = sink.with_group("api").with_attrs([Attr("env", "prod")])
        api.handle(Record(datetime.now(), Level.INFO, "started"))
        # 2025/01/11 12:00:00 INFO [api] started env=prod
    """

    def __init__(self, config: SinkConfig, output: SharedOutput) -> None:
        self._config = config
        self._output = output

    # ------------------------------------------------------------------
    # Read-only configuration
    # ------------------------------------------------------------------

    @property
    def config(self) -> SinkConfig:
        """Return the configuration snapshot."""
        return self._config

    @property
    def level(self) -> int:
        """Return the minimum level this sink writes."""
        return self._config.threshold

    @property
    def time_format(self) -> str:
        """Return the strftime pattern used for timestamps."""
        return self._config.time_format

    @property
    def group(self) -> str:
        """Return the group label, or an empty string."""
        return self._config.group

    @property
    def attrs(self) -> tuple[Attr, ...]:
        """Return the fixed attributes."""
        return self._config.attrs

    @property
    def destination(self) -> Destination:
        """Return the shared destination."""
        return self._output.destination

    # ------------------------------------------------------------------
    # Filtering and writing
    # ------------------------------------------------------------------

    def enabled(self, level: int) -> bool:
        """Report whether records at ``level`` would be written."""
        return level >= self._config.threshold

    def handle(self, record: Record) -> None:
        """
        Format and write a record.

        Records below the threshold are ignored. Otherwise exactly one
        write of the full line is made to the shared destination.

        Args:
            record: The record to write.

        Raises:
            LogWriteError: If the destination fails. The write is not retried.
        """
        if not self.enabled(record.level):
            return

        line = format_record(record, self._config)
        self._output.write(line.encode("utf-8"))

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def with_attrs(self, attrs: Iterable[Attr]) -> LineSink:
        """
        Return a new sink with ``attrs`` appended to the fixed attributes.

        The new sink shares this sink's destination and lock. This sink is
        not changed. Attributes with an empty key are kept but never rendered.
        """
        attrs = tuple(attrs)
        empty = sum(1 for attr in attrs if not attr.key)
        if empty:
            _log.debug("Keeping %d attribute(s) with an empty key; they are skipped when rendering", empty)
        return LineSink(self._config.extend(attrs), self._output)

    def with_group(self, name: str) -> LineSink:
        """
        Return a new sink whose group label is ``name``.

        The label replaces any existing one rather than nesting under it.
        """
        return LineSink(self._config.regroup(name), self._output)

    def __repr__(self) -> str:
        return (
            f"LineSink(level={self.level!r}, group={self.group!r}, "
            f"attrs={list(self.attrs)!r}, time_format={self.time_format!r})"
        )


def new_sink(
    threshold: str | int,
    destination: Destination,
    time_format: str = "",
) -> LineSink:
    """
    Create a root sink.

    Args:
        threshold: Minimum level to write, as an int or a name such as "INFO".
        destination: Where formatted lines are written.
        time_format: strftime pattern for timestamps. Empty means the default
            ``%Y/%m/%d %H:%M:%S``.

    Returns:
        A sink with no group, no fixed attributes and a fresh lock.
    """
    config = SinkConfig(threshold=resolve_level(threshold), time_format=time_format)
    return LineSink(config, SharedOutput(destination))

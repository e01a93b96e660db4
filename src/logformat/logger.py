"""
Core Logger class.

A thin front-end over LineSink that builds records from call arguments.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from logformat.attrs import args_to_attrs
from logformat.levels import Level
from logformat.record import Record
from logformat.sink import LineSink


def _local_now() -> datetime:
    return datetime.now().astimezone()


class Logger:
    """
    Build records from call arguments and hand them to a sink.

    Attributes can be given as ``Attr`` instances, alternating key/value
    positional arguments, or keyword arguments.

    Args:
        sink: The LineSink that filters and writes records.
        time_source: Callable returning the record timestamp. Injectable for tests.

    Example::

        from logformat import Logger, StreamDestination, new_sink

        logger = Logger(new_sink("DEBUG", StreamDestination(sys.stdout)))
        logger.info("App started", version="1.0.0")
        logger.warn("Low space", "available", 1.2)
        # 2025/01/11 12:00:00 INFO App started version=1.0.0
        # 2025/01/11 12:00:00 WARN Low space available=1.2
    """

    def __init__(
        self,
        sink: LineSink,
        *,
        time_source: Callable[[], datetime] | None = None,
    ) -> None:
        self._sink = sink
        self._time_source = time_source if time_source is not None else _local_now

    @property
    def sink(self) -> LineSink:
        """Return the underlying sink."""
        return self._sink

    # ------------------------------------------------------------------
    # Core emit
    # ------------------------------------------------------------------

    def enabled(self, level: int) -> bool:
        """Report whether records at ``level`` would be written."""
        return self._sink.enabled(level)

    def log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        """
        Write a record at ``level``.

        Nothing is built when the sink's threshold is above ``level``.

        Args:
            level: Integer severity.
            msg: The log message.
            *args: ``Attr`` instances or alternating key/value pairs.
            **kwargs: Further attributes, in call order.

        Raises:
            LogWriteError: If the destination fails.
        """
        if not self._sink.enabled(level):
            return
        record = Record(
            time=self._time_source(),
            level=level,
            message=msg,
            attrs=args_to_attrs(args, kwargs),
        )
        self._sink.handle(record)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Write a DEBUG record."""
        self.log(Level.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Write an INFO record."""
        self.log(Level.INFO, msg, *args, **kwargs)

    def warn(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Write a WARN record."""
        self.log(Level.WARN, msg, *args, **kwargs)

    warning = warn

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Write an ERROR record."""
        self.log(Level.ERROR, msg, *args, **kwargs)

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def with_attrs(self, *args: Any, **kwargs: Any) -> Logger:
        """Return a logger whose sink carries the given attributes on every line."""
        attrs = args_to_attrs(args, kwargs)
        if not attrs:
            return self
        return Logger(self._sink.with_attrs(attrs), time_source=self._time_source)

    def with_group(self, name: str) -> Logger:
        """Return a logger whose lines are tagged ``[name]``."""
        return Logger(self._sink.with_group(name), time_source=self._time_source)

"""
Bridge from stdlib logging to a LineSink.

Lets code that uses ``logging.getLogger()`` write through a sink::

    handler = SinkHandler(new_sink("INFO", StreamDestination()))
    logging.getLogger().addHandler(handler)
    logging.getLogger(__name__).warning("disk low", extra={"free_mb": 120})
    # 2025/01/11 12:00:00 WARN disk low free_mb=120
"""

from __future__ import annotations

import logging
from datetime import datetime

from logformat.attrs import Attr
from logformat.levels import from_stdlib_level
from logformat.record import Record
from logformat.sink import LineSink

# Fields every LogRecord has; anything else arrived through ``extra=``
_STANDARD_FIELDS = frozenset(vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class SinkHandler(logging.Handler):
    """
    A ``logging.Handler`` that forwards records to a LineSink.

    The sink's threshold decides what is written; the handler's own level
    defaults to NOTSET. Write failures go to ``Handler.handleError``.

    Args:
        sink: The sink to write to.
        level: Optional stdlib level for the handler itself.
    """

    def __init__(self, sink: LineSink, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._sink = sink

    @property
    def sink(self) -> LineSink:
        """Return the target sink."""
        return self._sink

    def emit(self, record: logging.LogRecord) -> None:
        """
        Convert ``record`` and write it through the sink.

        Failures, including a message that cannot be %-formatted, are
        reported through ``handleError`` instead of reaching the caller.
        """
        try:
            level = from_stdlib_level(record.levelno)
            if not self._sink.enabled(level):
                return
            self._sink.handle(self.to_record(record, level))
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)

    @staticmethod
    def to_record(record: logging.LogRecord, level: int | None = None) -> Record:
        """Build a Record from a stdlib LogRecord."""
        attrs = [
            Attr(key, value)
            for key, value in vars(record).items()
            if key not in _STANDARD_FIELDS and not key.startswith("_")
        ]
        if record.exc_info and record.exc_info[1] is not None:
            attrs.append(Attr("error", record.exc_info[1]))

        return Record(
            time=datetime.fromtimestamp(record.created).astimezone(),
            level=from_stdlib_level(record.levelno) if level is None else level,
            message=record.getMessage(),
            attrs=tuple(attrs),
        )

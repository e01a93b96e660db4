"""
logformat: plain-text, single-line log output for Python.

Formats leveled, timestamped records with key/value attributes into
lines like ``2025/01/11 12:00:00 INFO [api] started env=prod`` and writes
them to a shared destination safely from many threads.
"""

__version__ = "0.1.0"

from logformat.attrs import (
    Attr,
    args_to_attrs,
    describe,
    describe_safely,
    format_duration,
    format_float,
)
from logformat.bridge import SinkHandler
from logformat.config import DEFAULT_TIME_FORMAT, SinkConfig
from logformat.destinations import (
    Destination,
    FileDestination,
    MemoryDestination,
    StreamDestination,
)
from logformat.formatter import format_attrs, format_record
from logformat.levels import Level, from_stdlib_level, level_name, resolve_level
from logformat.logger import Logger
from logformat.record import Record
from logformat.sink import LineSink, LogWriteError, new_sink

__all__ = [
    "__version__",
    # Core
    "LineSink",
    "LogWriteError",
    "Logger",
    "Record",
    "SinkConfig",
    "DEFAULT_TIME_FORMAT",
    "new_sink",
    # Levels
    "Level",
    "from_stdlib_level",
    "level_name",
    "resolve_level",
    # Attributes and formatting
    "Attr",
    "args_to_attrs",
    "describe",
    "describe_safely",
    "format_attrs",
    "format_duration",
    "format_float",
    "format_record",
    # Destinations
    "Destination",
    "FileDestination",
    "MemoryDestination",
    "StreamDestination",
    # stdlib logging
    "SinkHandler",
]

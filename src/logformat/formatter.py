"""
Line formatting.

Renders a record as one line of text::

    2025/01/11 12:00:00 ERROR [api] Error occurred key=value code=123

The output depends only on the record and the sink configuration.
"""

from __future__ import annotations

from collections.abc import Iterable

from logformat.attrs import Attr, describe_safely
from logformat.config import SinkConfig
from logformat.levels import level_name
from logformat.record import Record


def format_attrs(attrs: Iterable[Attr]) -> str:
    """Render attributes as `` key=value`` segments, skipping empty keys."""
    return "".join(f" {attr.key}={describe_safely(attr.value)}" for attr in attrs if attr.key)


def format_record(record: Record, config: SinkConfig) -> str:
    """
    Format a record into a single newline-terminated line.

    Record attributes come first, then the sink's fixed attributes.

    Args:
        record: The record to render.
        config: Configuration of the sink doing the rendering.

    Returns:
        The formatted line, including the trailing newline.
    """
    parts = [
        record.time.strftime(config.time_format),
        " ",
        level_name(record.level),
        " ",
    ]
    if config.group:
        parts.append(f"[{config.group}] ")
    parts.append(record.message)
    parts.append(format_attrs(record.attrs))
    parts.append(format_attrs(config.attrs))
    parts.append("\n")
    return "".join(parts)

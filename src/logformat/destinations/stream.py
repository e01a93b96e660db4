"""
Stream destination.

Writes to an already-open stream such as ``sys.stderr``, ``sys.stdout``
or a binary file object.
"""

from __future__ import annotations

import io
import sys
from typing import IO, Any


class StreamDestination:
    """
    Destination that writes to an open text or binary stream.

    Text streams receive decoded text; binary streams receive the bytes
    unchanged. The stream is not closed by this class.

    Args:
        stream: Target stream (default ``sys.stderr``, looked up at write time).
        flush: Whether to flush after each write (default True).
        encoding: Encoding used to decode bytes for text streams (default "utf-8").

    Example:
        sink = new_sink(Level.INFO, StreamDestination(sys.stdout))
    """

    def __init__(
        self,
        stream: IO[Any] | None = None,
        *,
        flush: bool = True,
        encoding: str = "utf-8",
    ) -> None:
        self._stream = stream
        self._flush = flush
        self._encoding = encoding

    @property
    def stream(self) -> IO[Any]:
        """Return the target stream."""
        return self._stream if self._stream is not None else sys.stderr

    def write(self, data: bytes) -> int:
        """
        Write one chunk to the stream.

        Args:
            data: The bytes to write.

        Returns:
            The number of bytes accepted, ``len(data)`` on success.
        """
        stream = self.stream
        if _is_text(stream):
            stream.write(data.decode(self._encoding))
            written = len(data)
        else:
            written = stream.write(data)
            if written is None:
                written = len(data)
        if self._flush:
            stream.flush()
        return written


def _is_text(stream: IO[Any]) -> bool:
    if isinstance(stream, io.TextIOBase):
        return True
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return False
    # Fall back on the mode attribute for duck-typed streams
    return "b" not in getattr(stream, "mode", "")

"""
File destination.

Appends formatted lines to a file on disk.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, BinaryIO


class FileDestination:
    """
    Append-only binary log file.

    Bytes go to the file unchanged, in binary append mode, so the sink's
    UTF-8 lines land on disk exactly as formatted. Opening happens on first
    use and again after ``close()``; the lock only covers the handle.

    Args:
        path: Log file location; missing parent directories are created.
        flush: Flush the OS buffer after every line (default True).

    Example:
        with FileDestination("/var/log/app/app.log") as dest:
            sink = new_sink(Level.INFO, dest)
            ...
    """

    def __init__(self, path: str | Path, *, flush: bool = True) -> None:
        self._path = Path(path)
        self._flush = flush
        self._lock = threading.Lock()
        self._file: BinaryIO | None = None

        self._path.parent.mkdir(parents=True, exist_ok=True)

    def _ensure_open(self) -> BinaryIO:
        """Return the open handle, opening the file if needed."""
        with self._lock:
            if self._file is None or self._file.closed:
                self._file = open(self._path, mode="ab")
            return self._file

    def write(self, data: bytes) -> int:
        """
        Append one chunk to the file.

        Args:
            data: The bytes to append.

        Returns:
            The number of bytes written.
        """
        f = self._ensure_open()
        written = f.write(data)
        if self._flush:
            f.flush()
        return written

    def close(self) -> None:
        """Close the log file. The next write opens it again in append mode."""
        with self._lock:
            if self._file is not None and not self._file.closed:
                self._file.close()
            self._file = None

    @property
    def path(self) -> Path:
        """Return the log file location."""
        return self._path

    def __enter__(self) -> FileDestination:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        self.close()

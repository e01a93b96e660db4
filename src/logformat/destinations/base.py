"""
Base destination interface.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Destination(Protocol):
    """
    Protocol for output destinations.

    Anything with a blocking ``write(bytes)`` qualifies, including binary
    files and ``io.BytesIO``. Failure is reported by raising ``OSError``
    (or ``ValueError`` for a closed file), or by returning a byte count
    smaller than the data given.
    """

    def write(self, data: bytes) -> int | None:
        """
        Write ``data`` in full.

        Args:
            data: One formatted log line, UTF-8 encoded.
        """
        ...

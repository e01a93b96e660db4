"""
In-memory destination for testing and development.
"""


class MemoryDestination:
    """
    In-memory destination that stores each write in a list.

    Useful for testing and development. Not intended for production use.
    """

    def __init__(self) -> None:
        self.writes: list[bytes] = []

    def write(self, data: bytes) -> int:
        """
        Store one write in memory.

        Args:
            data: The bytes to store.
        """
        self.writes.append(bytes(data))
        return len(data)

    def getvalue(self) -> str:
        """Return everything written so far, decoded as UTF-8."""
        return b"".join(self.writes).decode("utf-8")

    def lines(self) -> list[str]:
        """Return the written text split into lines, without line endings."""
        return self.getvalue().splitlines()

    def clear(self) -> None:
        """Clear all stored writes."""
        self.writes.clear()

    def __len__(self) -> int:
        """Return the number of stored writes."""
        return len(self.writes)

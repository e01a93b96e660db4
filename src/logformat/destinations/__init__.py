"""
Output destinations for logformat.

A destination receives fully formatted lines as bytes. Sinks serialize
their writes, so destinations do not need to lock around ``write``.
"""

from logformat.destinations.base import Destination
from logformat.destinations.file import FileDestination
from logformat.destinations.memory import MemoryDestination
from logformat.destinations.stream import StreamDestination

__all__ = [
    "Destination",
    "FileDestination",
    "MemoryDestination",
    "StreamDestination",
]

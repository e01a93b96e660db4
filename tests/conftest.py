"""
Shared fixtures for logformat tests.
"""

from datetime import UTC, datetime

import pytest

from logformat import Level, LineSink, MemoryDestination, new_sink


@pytest.fixture
def memory_destination() -> MemoryDestination:
    """Create a fresh memory destination for testing."""
    return MemoryDestination()


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed UTC timestamp: 2025/01/11 12:00:00."""
    return datetime(2025, 1, 11, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def info_sink(memory_destination: MemoryDestination) -> LineSink:
    """Create a root INFO sink writing to the memory destination."""
    return new_sink(Level.INFO, memory_destination)

"""
Tests for the bundled destinations.
"""

from __future__ import annotations

import io
from datetime import datetime
from pathlib import Path

import pytest

from logformat import (
    Destination,
    FileDestination,
    Level,
    MemoryDestination,
    Record,
    StreamDestination,
    new_sink,
)


class TestMemoryDestination:
    """Tests for MemoryDestination."""

    def test_stores_each_write(self) -> None:
        dest = MemoryDestination()
        assert dest.write(b"one\n") == 4
        dest.write(b"two\n")
        assert len(dest) == 2
        assert dest.getvalue() == "one\ntwo\n"
        assert dest.lines() == ["one", "two"]

    def test_clear(self) -> None:
        dest = MemoryDestination()
        dest.write(b"x\n")
        dest.clear()
        assert len(dest) == 0
        assert dest.getvalue() == ""


class TestStreamDestination:
    """Tests for StreamDestination."""

    def test_text_stream(self) -> None:
        stream = io.StringIO()
        dest = StreamDestination(stream)
        assert dest.write("héllo\n".encode()) == len("héllo\n".encode())
        assert stream.getvalue() == "héllo\n"

    def test_binary_stream(self) -> None:
        stream = io.BytesIO()
        StreamDestination(stream).write(b"raw\n")
        assert stream.getvalue() == b"raw\n"

    def test_defaults_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        StreamDestination().write(b"to stderr\n")
        captured = capsys.readouterr()
        assert captured.err == "to stderr\n"
        assert captured.out == ""

    def test_stdout_with_sink(self, capsys: pytest.CaptureFixture[str]) -> None:
        import sys

        sink = new_sink(Level.INFO, StreamDestination(sys.stdout))
        sink.handle(Record(datetime(2025, 1, 11, 12, 0, 0), Level.WARN, "Low space"))
        assert capsys.readouterr().out == "2025/01/11 12:00:00 WARN Low space\n"

    def test_no_flush(self) -> None:
        class CountingStream(io.StringIO):
            flushes = 0

            def flush(self) -> None:
                CountingStream.flushes += 1
                super().flush()

        stream = CountingStream()
        StreamDestination(stream, flush=False).write(b"x\n")
        assert CountingStream.flushes == 0
        StreamDestination(stream).write(b"y\n")
        assert CountingStream.flushes == 1


class TestFileDestination:
    """Tests for FileDestination."""

    def test_appends_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "logs" / "app.log"
        with FileDestination(path) as dest:
            sink = new_sink(Level.INFO, dest)
            sink.handle(Record(datetime(2025, 1, 11, 12, 0, 0), Level.INFO, "first"))
            sink.handle(Record(datetime(2025, 1, 11, 12, 0, 1), Level.ERROR, "second"))

        assert path.read_text(encoding="utf-8") == (
            "2025/01/11 12:00:00 INFO first\n2025/01/11 12:00:01 ERROR second\n"
        )

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "a" / "b" / "c.log"
        FileDestination(path)
        assert path.parent.is_dir()

    def test_reopens_after_close(self, tmp_path: Path) -> None:
        dest = FileDestination(tmp_path / "app.log")
        dest.write(b"one\n")
        dest.close()
        dest.write(b"two\n")
        dest.close()
        assert dest.path.read_bytes() == b"one\ntwo\n"

    def test_appends_to_existing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "app.log"
        path.write_bytes(b"existing\n")
        with FileDestination(path) as dest:
            dest.write(b"new\n")
        assert path.read_bytes() == b"existing\nnew\n"

    def test_close_is_idempotent(self, tmp_path: Path) -> None:
        dest = FileDestination(tmp_path / "app.log")
        dest.close()
        dest.close()


def test_destinations_conform_to_protocol(tmp_path: Path) -> None:
    """All bundled destinations should conform to the Destination protocol."""
    assert isinstance(MemoryDestination(), Destination)
    assert isinstance(StreamDestination(io.StringIO()), Destination)
    assert isinstance(FileDestination(tmp_path / "x.log"), Destination)

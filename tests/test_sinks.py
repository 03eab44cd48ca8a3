"""Tests for output sinks"""

import io

import pytest

from applog.writers import FileSink, StreamSink


class TestFileSink:
    """Test file sink behavior."""

    def test_open_creates_directories(self, tmp_path):
        path = tmp_path / "a" / "b" / "app.log"
        sink = FileSink.open(path)
        assert path.exists()
        assert sink.path == path
        assert not sink.closed
        sink.close()

    def test_open_existing_directory(self, tmp_path):
        FileSink.open(tmp_path / "one.log").close()
        FileSink.open(tmp_path / "two.log").close()
        assert (tmp_path / "two.log").exists()

    def test_write_returns_length(self, tmp_path):
        path = tmp_path / "app.log"
        with FileSink.open(path) as sink:
            assert sink.write(b"hello\n") == 6
        assert path.read_bytes() == b"hello\n"

    def test_write_is_visible_immediately(self, tmp_path):
        path = tmp_path / "app.log"
        sink = FileSink.open(path)
        sink.write(bytearray(b"record\n"))
        assert path.stat().st_size == 7
        sink.close()

    def test_reopen_appends(self, tmp_path):
        path = tmp_path / "app.log"
        with FileSink.open(path) as sink:
            sink.write(b"first run\n")
        size_before = path.stat().st_size

        with FileSink.open(path) as sink:
            sink.write(b"second run\n")

        assert path.stat().st_size > size_before
        assert path.read_bytes() == b"first run\nsecond run\n"

    def test_write_after_close_raises(self, tmp_path):
        sink = FileSink.open(tmp_path / "app.log")
        sink.close()
        with pytest.raises(OSError):
            sink.write(b"late\n")

    def test_close_is_idempotent(self, tmp_path):
        sink = FileSink.open(tmp_path / "app.log")
        sink.close()
        sink.close()
        assert sink.closed

    def test_open_fails_when_directory_blocked(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        with pytest.raises(OSError):
            FileSink.open(blocker / "logs" / "app.log")


class TestStreamSink:
    """Test stream sink behavior."""

    def test_binary_stream(self):
        stream = io.BytesIO()
        sink = StreamSink(stream)
        assert sink.write(b"abc\n") == 4
        assert stream.getvalue() == b"abc\n"

    def test_text_stream(self):
        stream = io.StringIO()
        sink = StreamSink(stream)
        sink.write("héllo\n".encode("utf-8"))
        assert stream.getvalue() == "héllo\n"

    def test_text_wrapper_stream(self):
        raw = io.BytesIO()
        stream = io.TextIOWrapper(raw, encoding="utf-8")
        sink = StreamSink(stream)
        sink.write(b"wrapped\n")
        assert raw.getvalue() == b"wrapped\n"

    def test_close_leaves_stream_open(self):
        stream = io.BytesIO()
        sink = StreamSink(stream)
        sink.close()
        assert sink.closed
        assert not stream.closed
        with pytest.raises(OSError):
            sink.write(b"late\n")

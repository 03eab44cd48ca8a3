"""Tests for the process-wide default logger"""

import io
import sys

import pytest

from applog import FormatFlags, Logger, LoggerConfig, LogLevel
from applog.core import default_logger as log
from applog.writers import StreamSink


@pytest.fixture
def stream():
    """Install a default logger writing to a buffer."""
    buffer = io.BytesIO()
    logger = Logger(LoggerConfig(flags=0, min_level=LogLevel.DEBUG), sink=StreamSink(buffer))
    previous = log.set_default_logger(logger)
    yield buffer
    log.set_default_logger(previous)


class TestDefaultLogger:
    """Test module-level call family."""

    def test_call_family(self, stream):
        log.debugf("d=%d", 1)
        log.info("i", 2)
        log.warnln("w")
        log.warning("alias")
        log.errorf("e=%s", "x")
        log.println("plain")
        assert stream.getvalue() == (
            b"[level=debug] d=1\n"
            b"[level=info] i 2\n"
            b"[level=warning] w\n"
            b"[level=warning] alias\n"
            b"[level=error] e=x\n"
            b"plain\n"
        )

    def test_set_level(self, stream):
        log.set_level("error")
        log.info("hidden")
        log.printf("shown")
        log.error("shown too")
        assert stream.getvalue() == b"shown\n[level=error] shown too\n"

    def test_caller_is_application_code(self, stream):
        log.set_flags(FormatFlags.SHORT_FILE)
        lineno = sys._getframe().f_lineno; log.infof("where")  # noqa: E702
        expected = f"test_default_logger.py:{lineno}: [level=info] where\n"
        assert stream.getvalue().decode() == expected

    def test_set_output(self, stream):
        other = io.BytesIO()
        previous = log.set_output(StreamSink(other))
        log.info("moved")
        assert stream.getvalue() == b""
        assert other.getvalue() == b"[level=info] moved\n"
        assert previous.closed

    def test_set_default_logger_type_check(self):
        with pytest.raises(TypeError):
            log.set_default_logger("not a logger")

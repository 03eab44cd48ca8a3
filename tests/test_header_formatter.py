"""Tests for record header rendering"""

from datetime import datetime, timedelta, timezone

import pytest

from applog import FormatFlags
from applog.formatters import HeaderFormatter, itoa
from applog.formatters.header_formatter import short_file_name

STAMP = datetime(2009, 1, 23, 1, 23, 23, 123123)


def render(flags, timestamp=STAMP, file="/a/b/c/d.py", line=23):
    buf = bytearray()
    HeaderFormatter().render(buf, timestamp, file, line, flags)
    return bytes(buf)


class TestItoa:
    """Test fixed-width integer rendering."""

    @pytest.mark.parametrize(
        "value,width,expected",
        [
            (7, 2, b"07"),
            (2024, 4, b"2024"),
            (5, 6, b"000005"),
            (123, -1, b"123"),
            (0, -1, b"0"),
            (123456, 6, b"123456"),
            (12, 1, b"12"),
        ],
    )
    def test_itoa(self, value, width, expected):
        buf = bytearray()
        itoa(buf, value, width)
        assert bytes(buf) == expected

    def test_appends(self):
        buf = bytearray(b"x=")
        itoa(buf, 9, 2)
        assert bytes(buf) == b"x=09"


class TestHeaderFormatter:
    """Test header rendering per flag."""

    def test_no_flags(self):
        assert render(FormatFlags(0)) == b""

    def test_date(self):
        assert render(FormatFlags.DATE) == b"2009/01/23 "

    def test_time(self):
        assert render(FormatFlags.TIME) == b"01:23:23 "

    def test_std(self):
        assert render(FormatFlags.STD) == b"2009/01/23 01:23:23 "

    def test_microseconds(self):
        assert render(FormatFlags.MICROSECONDS) == b"01:23:23.123123 "
        assert render(FormatFlags.STD | FormatFlags.MICROSECONDS) == (
            b"2009/01/23 01:23:23.123123 "
        )

    def test_long_file(self):
        assert render(FormatFlags.LONG_FILE) == b"/a/b/c/d.py:23: "

    def test_short_file(self):
        assert render(FormatFlags.SHORT_FILE) == b"d.py:23: "

    def test_short_file_overrides_long(self):
        assert render(FormatFlags.SHORT_FILE | FormatFlags.LONG_FILE) == b"d.py:23: "

    def test_line_not_padded(self):
        assert render(FormatFlags.SHORT_FILE, line=7) == b"d.py:7: "

    def test_full_header(self):
        flags = FormatFlags.STD | FormatFlags.MICROSECONDS | FormatFlags.SHORT_FILE
        assert render(flags, line=1024) == b"2009/01/23 01:23:23.123123 d.py:1024: "

    def test_utc(self):
        tokyo = timezone(timedelta(hours=9))
        stamp = datetime(2009, 1, 23, 10, 0, 5, tzinfo=tokyo)
        assert render(FormatFlags.STD | FormatFlags.UTC, timestamp=stamp) == (
            b"2009/01/23 01:00:05 "
        )

    def test_utc_crosses_date(self):
        tokyo = timezone(timedelta(hours=9))
        stamp = datetime(2009, 1, 1, 3, 0, 0, tzinfo=tokyo)
        assert render(FormatFlags.STD | FormatFlags.UTC, timestamp=stamp) == (
            b"2008/12/31 18:00:00 "
        )

    def test_deterministic(self):
        flags = FormatFlags.STD | FormatFlags.MICROSECONDS | FormatFlags.LONG_FILE
        assert render(flags) == render(flags)

    def test_round_trip(self):
        header = render(FormatFlags.STD | FormatFlags.MICROSECONDS).decode()
        parsed = datetime.strptime(header.strip(), "%Y/%m/%d %H:%M:%S.%f")
        assert parsed == STAMP

    def test_round_trip_without_microseconds(self):
        header = render(FormatFlags.STD).decode()
        parsed = datetime.strptime(header.strip(), "%Y/%m/%d %H:%M:%S")
        assert parsed == STAMP.replace(microsecond=0)


class TestShortFileName:
    """Test caller path shortening."""

    def test_strips_directories(self):
        assert short_file_name("/srv/app/handlers.py") == "handlers.py"

    def test_bare_name(self):
        assert short_file_name("handlers.py") == "handlers.py"

    def test_relative(self):
        assert short_file_name("pkg/mod.py") == "mod.py"

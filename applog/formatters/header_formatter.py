"""
Header formatter

Renders the date, time and caller prefix of a record directly into a
caller-supplied bytearray. Runs on every log call, so digits are assembled
by hand instead of going through str formatting.
"""

import os
from datetime import datetime, timezone

from applog.core.format_flags import FormatFlags

_ZERO = ord("0")

_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep, "/") if sep)


def itoa(buf: bytearray, i: int, wid: int) -> None:
    """
    Append the decimal form of a non-negative integer to buf.

    Digits are assembled in reverse in a scratch array, then appended.

    Args:
        buf: Destination buffer
        i: Non-negative integer
        wid: Minimum width, zero-padded; negative for no padding
    """
    b = bytearray(20)
    bp = len(b) - 1
    while i >= 10 or wid > 1:
        wid -= 1
        q = i // 10
        b[bp] = _ZERO + i - q * 10
        bp -= 1
        i = q
    # i < 10
    b[bp] = _ZERO + i
    buf.extend(b[bp:])


def short_file_name(path: str) -> str:
    """Return the part of path after its final separator."""
    cut = max(path.rfind(sep) for sep in _SEPARATORS)
    if cut > 0:
        return path[cut + 1:]
    return path


class HeaderFormatter:
    """
    Build the per-record prefix from a set of FormatFlags.

    Output order: "YYYY/MM/DD ", "HH:MM:SS[.uuuuuu] ", "file:line: ".
    """

    def render(
        self,
        buf: bytearray,
        timestamp: datetime,
        caller_file: str,
        caller_line: int,
        flags: FormatFlags,
    ) -> None:
        """
        Append the header for one record to buf.

        Args:
            buf: Destination buffer
            timestamp: Record time
            caller_file: Path of the calling source file
            caller_line: Line number of the call
            flags: Active format flags
        """
        if flags & FormatFlags.UTC:
            timestamp = timestamp.astimezone(timezone.utc)

        if flags & (FormatFlags.DATE | FormatFlags.TIME | FormatFlags.MICROSECONDS):
            if flags & FormatFlags.DATE:
                itoa(buf, timestamp.year, 4)
                buf.append(0x2F)  # '/'
                itoa(buf, timestamp.month, 2)
                buf.append(0x2F)
                itoa(buf, timestamp.day, 2)
                buf.append(0x20)
            if flags & (FormatFlags.TIME | FormatFlags.MICROSECONDS):
                itoa(buf, timestamp.hour, 2)
                buf.append(0x3A)  # ':'
                itoa(buf, timestamp.minute, 2)
                buf.append(0x3A)
                itoa(buf, timestamp.second, 2)
                if flags & FormatFlags.MICROSECONDS:
                    buf.append(0x2E)  # '.'
                    itoa(buf, timestamp.microsecond, 6)
                buf.append(0x20)

        if flags & (FormatFlags.SHORT_FILE | FormatFlags.LONG_FILE):
            if flags & FormatFlags.SHORT_FILE:
                caller_file = short_file_name(caller_file)
            buf.extend(caller_file.encode("utf-8", "replace"))
            buf.append(0x3A)
            itoa(buf, caller_line, -1)
            buf.extend(b": ")

    def __repr__(self) -> str:
        """String representation."""
        return "HeaderFormatter()"

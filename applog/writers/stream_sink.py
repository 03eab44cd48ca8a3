"""Stream sink"""

import errno
import io
import sys
from typing import Union


class StreamSink:
    """Write records to a stream, stderr by default."""

    def __init__(self, stream=None, encoding: str = "utf-8"):
        """
        Initialize stream sink.

        Args:
            stream: Text or binary stream (default: sys.stderr)
            encoding: Used to decode records for text streams without
                      an underlying binary buffer
        """
        self.stream = stream if stream is not None else sys.stderr
        self.encoding = encoding
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, data: Union[bytes, bytearray]) -> int:
        """Write one record to the stream."""
        if self._closed:
            raise OSError(errno.EBADF, "log sink is closed")
        raw = getattr(self.stream, "buffer", None)
        if raw is not None:
            # Text wrapper: flush pending text before going underneath it
            self.stream.flush()
            n = raw.write(data)
            raw.flush()
        elif isinstance(self.stream, io.TextIOBase):
            self.stream.write(bytes(data).decode(self.encoding, "replace"))
            n = len(data)
        else:
            n = self.stream.write(data)
        self.stream.flush()
        return n

    def flush(self) -> None:
        """Flush stream."""
        self.stream.flush()

    def close(self) -> None:
        """Flush only; the stream belongs to the caller."""
        if self._closed:
            return
        self._closed = True
        try:
            self.stream.flush()
        except (OSError, ValueError) as e:
            print(f"Log sink close error: {e}", file=sys.stderr)

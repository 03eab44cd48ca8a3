"""File sink"""

import errno
import sys
from pathlib import Path
from typing import BinaryIO, Optional, Union


class FileSink:
    """
    Append-only log file.

    A sink is installed into a Logger as a unit and replaced, never
    reopened in place. Every write is flushed so a record reaches the OS
    in one piece before the logger lock is released.
    """

    def __init__(self, path: Union[str, Path], file: BinaryIO):
        """
        Wrap an already open binary file.

        Use FileSink.open() to create one from a path.

        Args:
            path: Path of the log file
            file: File object opened for binary append
        """
        self.path = Path(path)
        self._file: Optional[BinaryIO] = file

    @classmethod
    def open(cls, path: Union[str, Path]) -> "FileSink":
        """
        Open a log file in create-or-append mode.

        Missing parent directories are created. An existing file is
        appended to, never truncated.

        Args:
            path: Path of the log file

        Returns:
            New FileSink

        Raises:
            OSError: If the directory or file cannot be created or opened
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        return cls(path, open(path, "ab"))

    @property
    def closed(self) -> bool:
        return self._file is None

    def write(self, data: Union[bytes, bytearray]) -> int:
        """
        Write one record to the file.

        Returns:
            Number of bytes written

        Raises:
            OSError: If the sink is closed or the write fails
        """
        if self._file is None:
            raise OSError(errno.EBADF, "log sink is closed", str(self.path))
        n = self._file.write(data)
        self._file.flush()
        return n

    def flush(self) -> None:
        """Flush file buffer."""
        if self._file:
            self._file.flush()

    def close(self) -> None:
        """Close file. Errors are reported, never raised."""
        if self._file is None:
            return
        file, self._file = self._file, None
        try:
            file.close()
        except OSError as e:
            print(f"Log sink close error ({self.path}): {e}", file=sys.stderr)

    def __enter__(self) -> "FileSink":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        """String representation."""
        return f"FileSink(path='{self.path}', closed={self.closed})"

"""Record header flags"""

from enum import IntFlag
from typing import Iterable, Union


class FormatFlags(IntFlag):
    """
    Toggles controlling the header written before each record.

    Flags are logger-scoped. STD bundles DATE and TIME.
    """

    DATE = 1            # 2009/01/23
    TIME = 2            # 01:23:23
    MICROSECONDS = 4    # 01:23:23.123123, implies TIME
    LONG_FILE = 8       # /a/b/c/d.py:23
    SHORT_FILE = 16     # d.py:23, overrides LONG_FILE
    UTC = 32            # use UTC rather than the local time zone
    STD = DATE | TIME

    @classmethod
    def parse(cls, value: Union["FormatFlags", int, str, Iterable[str]]) -> "FormatFlags":
        """
        Build flags from configuration values.

        Args:
            value: FormatFlags, int, a flag name such as "std", or an
                   iterable of flag names

        Returns:
            Combined FormatFlags

        Raises:
            ValueError: If a flag name is unknown
        """
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            value = [value]

        flags = cls(0)
        for name in value:
            key = name.strip().upper()
            if key not in cls.__members__:
                raise ValueError(f"Invalid format flag: {name}")
            flags |= cls.__members__[key]
        return flags

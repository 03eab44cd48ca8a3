"""
Log formatters module

Provides the record header formatter.
"""

from applog.formatters.header_formatter import HeaderFormatter, itoa

__all__ = ["HeaderFormatter", "itoa"]

"""
Core module for applog

This module contains the fundamental classes:
- Logger: Leveled logger writing to a single swappable sink
- LoggerBuilder: Builder pattern for daily logger construction
- LogLevel: Log level enumeration
- FormatFlags: Record header flags
- LoggerConfig: Configuration management
"""

from applog.core.logger import Logger
from applog.core.logger_builder import LoggerBuilder
from applog.core.log_level import LogLevel
from applog.core.format_flags import FormatFlags
from applog.core.logger_config import LoggerConfig

__all__ = ["Logger", "LoggerBuilder", "LogLevel", "FormatFlags", "LoggerConfig"]

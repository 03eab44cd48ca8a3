"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

applog - A leveled file logger with calendar-based file rotation
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from applog.core.logger import Logger
from applog.core.logger_builder import LoggerBuilder
from applog.core.log_level import LogLevel
from applog.core.format_flags import FormatFlags
from applog.core.logger_config import LoggerConfig
from applog.rotation.daily_logger import AutoDailyLogger
from applog.rotation.rotation_policy import RotationKind, RotationPolicy

# Import submodules (not all classes by default)
from applog import filters
from applog import formatters
from applog import rotation
from applog import writers

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogLevel",
    "FormatFlags",
    "LoggerConfig",
    "AutoDailyLogger",
    "RotationKind",
    "RotationPolicy",
    "filters",
    "formatters",
    "rotation",
    "writers",
]

"""
Log filters module

Provides the severity gate used by the logger.
"""

from applog.filters.level_filter import LevelFilter

__all__ = ["LevelFilter"]

"""Tests for configuration and the builder"""

from datetime import datetime, timedelta
from pathlib import Path

import pytest

from applog import AutoDailyLogger, FormatFlags, LoggerBuilder, LoggerConfig, LogLevel
from applog.core import default_logger
from applog.rotation import ManualTrigger, PeriodResolution, RotationKind


class TestFormatFlags:
    """Test flag parsing."""

    def test_std(self):
        assert FormatFlags.STD == FormatFlags.DATE | FormatFlags.TIME

    def test_parse_names(self):
        assert FormatFlags.parse(["std", "short_file"]) == (
            FormatFlags.DATE | FormatFlags.TIME | FormatFlags.SHORT_FILE
        )
        assert FormatFlags.parse("utc") == FormatFlags.UTC
        assert FormatFlags.parse(3) == FormatFlags.STD

    def test_parse_invalid(self):
        with pytest.raises(ValueError):
            FormatFlags.parse(["date", "colour"])


class TestLoggerConfig:
    """Test logger configuration."""

    def test_default_config(self):
        config = LoggerConfig.default()
        assert config.name == "applog"
        assert config.min_level == LogLevel.INFO
        assert config.flags == FormatFlags.STD | FormatFlags.LONG_FILE
        assert config.rotation is RotationKind.DAILY
        assert config.log_directory == Path("logs")
        assert config.fail_fast is False

    def test_debug_config(self):
        config = LoggerConfig.debug_config()
        assert config.min_level == LogLevel.DEBUG
        assert config.rotation is RotationKind.HOURLY

    def test_production_config(self):
        config = LoggerConfig.production_config()
        assert config.min_level == LogLevel.WARN
        assert config.fail_fast is True

    def test_string_values_converted(self):
        config = LoggerConfig(
            min_level="debug",
            log_directory="/var/log/app",
            rotation="Interval",
            rotation_interval=600,
            resolution="day",
            flags=["date", "time"],
        )
        assert config.min_level == LogLevel.DEBUG
        assert config.log_directory == Path("/var/log/app")
        assert config.rotation is RotationKind.INTERVAL
        assert config.rotation_interval == timedelta(minutes=10)
        assert config.resolution is PeriodResolution.DAY
        assert config.flags == FormatFlags.STD

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            LoggerConfig(min_level="loud")

    def test_invalid_rotation(self):
        with pytest.raises(ValueError):
            LoggerConfig(rotation="weekly")

    def test_interval_required(self):
        with pytest.raises(ValueError):
            LoggerConfig(rotation=RotationKind.INTERVAL)
        with pytest.raises(ValueError):
            LoggerConfig(rotation=RotationKind.INTERVAL, rotation_interval=-5)

    def test_invalid_encoding(self):
        with pytest.raises(ValueError, match="no-such-codec"):
            LoggerConfig(encoding="no-such-codec")
        assert LoggerConfig(encoding="latin-1").encoding == "latin-1"

    def test_from_dict(self):
        config = LoggerConfig.from_dict(
            {"directory": "logs/app", "prefix": "svc-", "level": "warn", "rotation": "hourly"}
        )
        assert config.log_directory == Path("logs/app")
        assert config.prefix == "svc-"
        assert config.min_level == LogLevel.WARN
        assert config.rotation is RotationKind.HOURLY

    def test_from_dict_unknown_key(self):
        with pytest.raises(ValueError):
            LoggerConfig.from_dict({"retention": "7d"})


class TestLoggerBuilder:
    """Test builder pattern."""

    def test_build(self, tmp_path):
        trigger = ManualTrigger()
        daily = (LoggerBuilder()
            .with_name("builder_test")
            .with_level("debug")
            .with_directory(tmp_path)
            .with_prefix("b-")
            .with_flags(0)
            .with_rotation(RotationKind.INTERVAL, timedelta(minutes=30))
            .with_resolution(PeriodResolution.DAY)
            .with_trigger(trigger)
            .with_clock(lambda: datetime(2024, 3, 1, 8))
            .build())

        assert isinstance(daily, AutoDailyLogger)
        assert daily.logger.name == "builder_test"
        assert daily.logger.level == LogLevel.DEBUG
        assert daily.policy.kind is RotationKind.INTERVAL
        assert daily.scheduler.trigger is trigger
        assert daily.current_path == tmp_path / "b-20240301.log"
        daily.stop()

    def test_build_config(self, tmp_path):
        config = LoggerBuilder().with_directory(tmp_path).with_fail_fast().build_config()
        assert config.log_directory == tmp_path
        assert config.fail_fast is True

    def test_as_default(self, tmp_path):
        previous = default_logger.default_logger()
        try:
            daily = (LoggerBuilder()
                .with_directory(tmp_path)
                .with_trigger(ManualTrigger())
                .as_default()
                .build())
            assert default_logger.default_logger() is daily.logger
            daily.stop()
        finally:
            default_logger.set_default_logger(previous)

#!/usr/bin/env python3
"""Basic usage example"""

from applog import LoggerBuilder, LogLevel, FormatFlags, RotationKind

def main():
    # Create daily-rotating logger with builder pattern
    daily = (LoggerBuilder()
        .with_name("example")
        .with_level(LogLevel.DEBUG)
        .with_directory("logs")
        .with_prefix("example-")
        .with_flags(FormatFlags.STD | FormatFlags.SHORT_FILE)
        .with_rotation(RotationKind.DAILY)
        .build())

    with daily:
        log = daily.logger
        log.debug("This is debug")
        log.infof("Application started, pid=%d", 1234)
        log.warnln("This is warning")
        log.error("This is error")
        log.println("This is always written")

if __name__ == "__main__":
    main()

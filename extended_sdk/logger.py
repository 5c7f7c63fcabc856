"""Logging interface and implementations used by transports and clients."""

import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional, TextIO


class LogLevel(str, Enum):
    """Log level enumeration."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    NONE = "none"


_SEVERITY = {
    LogLevel.DEBUG: 0,
    LogLevel.INFO: 1,
    LogLevel.WARN: 2,
    LogLevel.ERROR: 3,
    LogLevel.NONE: 4,
}


class Logger(ABC):
    """Abstract logger interface accepted by every SDK component."""

    @abstractmethod
    def debug(self, message: str, *args: Any) -> None:
        """Log debug message."""

    @abstractmethod
    def info(self, message: str, *args: Any) -> None:
        """Log info message."""

    @abstractmethod
    def warn(self, message: str, *args: Any) -> None:
        """Log warning message."""

    @abstractmethod
    def error(self, message: str, *args: Any) -> None:
        """Log error message."""


class ConsoleLogger(Logger):
    """
    Console logger with a minimum level.

    Lines are written as ``"{prefix} {LEVEL}: {message}"``; extra positional
    arguments are appended space-separated, the way ``print`` joins them.
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.INFO,
        prefix: str = "[Extended SDK]",
        stream: Optional[TextIO] = None,
    ):
        """
        Initialize console logger.

        Args:
            level: Minimum log level to display
            prefix: Prefix for log messages
            stream: Output stream, stdout when omitted
        """
        self.level = level
        self.prefix = prefix
        self._stream = stream

    def _emit(self, level: LogLevel, message: str, args: tuple) -> None:
        if _SEVERITY[level] < _SEVERITY[self.level] or self.level is LogLevel.NONE:
            return
        line = f"{self.prefix} {level.value.upper()}: {message}"
        print(line, *args, file=self._stream or sys.stdout)

    def debug(self, message: str, *args: Any) -> None:
        self._emit(LogLevel.DEBUG, message, args)

    def info(self, message: str, *args: Any) -> None:
        self._emit(LogLevel.INFO, message, args)

    def warn(self, message: str, *args: Any) -> None:
        self._emit(LogLevel.WARN, message, args)

    def error(self, message: str, *args: Any) -> None:
        self._emit(LogLevel.ERROR, message, args)

    def set_level(self, level: LogLevel) -> None:
        """Set log level."""
        self.level = level

    def get_level(self) -> LogLevel:
        """Get current log level."""
        return self.level


class NoopLogger(Logger):
    """Logger that discards everything. Default for transports and clients."""

    def debug(self, message: str, *args: Any) -> None:
        pass

    def info(self, message: str, *args: Any) -> None:
        pass

    def warn(self, message: str, *args: Any) -> None:
        pass

    def error(self, message: str, *args: Any) -> None:
        pass

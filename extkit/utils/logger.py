"""
extkit Logger
=============

Structured logging with pluggable formatters and handlers.

Every extkit module logs through a named logger obtained from `get_logger`.
Loggers created before or after `configure_logging` share the same level
and handlers, so configuring once at start-up covers the whole package.
"""

from __future__ import annotations

import json
import logging
import sys
import traceback
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Any, Dict, List, Optional, TextIO, Union


class LogLevel(IntEnum):
    """Log levels."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @classmethod
    def parse(cls, value: Union[str, int, "LogLevel"]) -> "LogLevel":
        """
        Resolve a level from its name or numeric value.

        Raises:
            ValueError: If the value names no known level
        """
        if isinstance(value, LogLevel):
            return value
        if isinstance(value, int):
            return cls(value)
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {value!r}") from None


@dataclass
class LogRecord:
    """
    Structured log record.

    Attributes:
        level: Log level
        message: Log message
        timestamp: Record timestamp
        context: Additional key/value context
        exception: Exception info
        logger_name: Name of the emitting logger
    """

    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=datetime.now)
    context: Dict[str, Any] = field(default_factory=dict)
    exception: Optional[BaseException] = None
    logger_name: str = "extkit"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data = {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level.name,
            "message": self.message,
            "logger": self.logger_name,
        }

        if self.context:
            data["context"] = self.context

        if self.exception:
            data["exception"] = {
                "type": type(self.exception).__name__,
                "message": str(self.exception),
            }

        return data

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), default=str)


class LogFormatter:
    """Base log formatter."""

    def format(self, record: LogRecord) -> str:
        raise NotImplementedError


class TextFormatter(LogFormatter):
    """
    Plain text formatter.

    Example output:
        2024-01-15 10:30:45 [DEBUG] extkit.debounce: Attempt suppressed remaining_ms=120.0
    """

    _colors = {
        LogLevel.DEBUG: "\033[36m",    # Cyan
        LogLevel.INFO: "\033[32m",     # Green
        LogLevel.WARNING: "\033[33m",  # Yellow
        LogLevel.ERROR: "\033[31m",    # Red
        LogLevel.CRITICAL: "\033[35m", # Magenta
    }
    _reset = "\033[0m"

    def __init__(
        self,
        format_string: Optional[str] = None,
        date_format: str = "%Y-%m-%d %H:%M:%S",
        colors: bool = False,
    ):
        self.format_string = format_string or "{timestamp} [{level}] {logger}: {message}"
        self.date_format = date_format
        self.colors = colors

    def format(self, record: LogRecord) -> str:
        level = record.level.name
        if self.colors:
            level = f"{self._colors.get(record.level, '')}{level}{self._reset}"

        message = record.message
        if record.context:
            context_str = " ".join(f"{k}={v}" for k, v in record.context.items())
            message = f"{message} {context_str}"

        output = self.format_string.format(
            timestamp=record.timestamp.strftime(self.date_format),
            level=level,
            message=message,
            logger=record.logger_name,
        )

        if record.exception:
            output += "\n" + "".join(
                traceback.format_exception(
                    type(record.exception),
                    record.exception,
                    record.exception.__traceback__,
                )
            ).rstrip("\n")

        return output


class JsonFormatter(LogFormatter):
    """
    JSON formatter for structured logging.

    Example output:
        {"timestamp": "2024-01-15T10:30:45", "level": "INFO", "message": "Settings loaded"}
    """

    def __init__(self, pretty: bool = False):
        self.pretty = pretty

    def format(self, record: LogRecord) -> str:
        if self.pretty:
            return json.dumps(record.to_dict(), indent=2, default=str)
        return record.to_json()


class StreamHandler:
    """Writes formatted records to a text stream (stderr by default)."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        formatter: Optional[LogFormatter] = None,
        level: LogLevel = LogLevel.DEBUG,
    ):
        self.stream = stream
        self.formatter = formatter or TextFormatter()
        self.level = level

    def handle(self, record: LogRecord) -> None:
        if record.level >= self.level:
            stream = self.stream if self.stream is not None else sys.stderr
            stream.write(self.formatter.format(record) + "\n")
            stream.flush()


class Logger:
    """
    Structured logger.

    Example:
        logger = get_logger("extkit.debounce")

        logger.debug("Attempt suppressed", remaining_ms=120.0)
        logger.error("Action failed", exception=e)

        # With context
        logger = logger.with_context(binding="submit-button")
        logger.debug("Attempt accepted")
    """

    def __init__(
        self,
        name: str = "extkit",
        level: Optional[LogLevel] = None,
        handlers: Optional[List[StreamHandler]] = None,
    ):
        """
        Initialize logger.

        Args:
            name: Logger name
            level: Minimum level; follows the package default when None
            handlers: Handlers; follow the package default when None
        """
        self.name = name
        self._level = level
        self._handlers = handlers
        self._context: Dict[str, Any] = {}

    @property
    def level(self) -> LogLevel:
        return self._level if self._level is not None else _defaults["level"]

    @property
    def handlers(self) -> List[StreamHandler]:
        return self._handlers if self._handlers is not None else _defaults["handlers"]

    def with_context(self, **context: Any) -> "Logger":
        """
        Create logger with additional context.

        Args:
            **context: Context key-values

        Returns:
            New logger sharing this logger's handlers
        """
        new_logger = Logger(
            name=self.name,
            level=self._level,
            handlers=self._handlers,
        )
        new_logger._context = {**self._context, **context}
        return new_logger

    def _log(
        self,
        level: LogLevel,
        message: str,
        exception: Optional[BaseException] = None,
        **context: Any,
    ) -> None:
        if level < self.level:
            return

        record = LogRecord(
            level=level,
            message=message,
            context={**self._context, **context},
            exception=exception,
            logger_name=self.name,
        )

        for handler in self.handlers:
            try:
                handler.handle(record)
            except Exception as e:
                # A broken handler must not break the caller
                sys.__stderr__.write(f"extkit: log handler failed: {e}\n")

    def debug(self, message: str, **context: Any) -> None:
        self._log(LogLevel.DEBUG, message, **context)

    def info(self, message: str, **context: Any) -> None:
        self._log(LogLevel.INFO, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(LogLevel.WARNING, message, **context)

    def error(
        self,
        message: str,
        exception: Optional[BaseException] = None,
        **context: Any,
    ) -> None:
        self._log(LogLevel.ERROR, message, exception, **context)

    def exception(self, message: str, **context: Any) -> None:
        """Log the exception currently being handled."""
        self._log(LogLevel.ERROR, message, sys.exc_info()[1], **context)


# Package-wide defaults shared by every logger without explicit overrides
_defaults: Dict[str, Any] = {
    "level": LogLevel.WARNING,
    "handlers": [StreamHandler()],
}

# Global logger registry
_loggers: Dict[str, Logger] = {}


def get_logger(name: str = "extkit") -> Logger:
    """
    Get or create a named logger.

    Args:
        name: Logger name, conventionally "extkit.<module>"

    Returns:
        Logger instance
    """
    if name not in _loggers:
        _loggers[name] = Logger(name=name)
    return _loggers[name]


def configure_logging(
    level: Union[LogLevel, str, int] = LogLevel.INFO,
    format: str = "text",
    stream: Optional[TextIO] = None,
    colors: bool = False,
) -> Logger:
    """
    Configure package-wide logging.

    Args:
        level: Minimum level
        format: Output format ("text" or "json")
        stream: Destination stream (stderr by default)
        colors: Colourise text output

    Returns:
        The root "extkit" logger
    """
    if format == "json":
        formatter: LogFormatter = JsonFormatter()
    elif format == "text":
        formatter = TextFormatter(colors=colors)
    else:
        raise ValueError(f"Unknown log format: {format!r}")

    _defaults["level"] = LogLevel.parse(level)
    _defaults["handlers"] = [StreamHandler(stream=stream, formatter=formatter)]

    return get_logger("extkit")

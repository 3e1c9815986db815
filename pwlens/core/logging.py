# ruff: noqa: A005
"""Structured logging configuration for pwlens.

Provides structlog-based logging with a configurable pipeline, context
management and security-focused sanitization. Password material must never
reach a log sink: the SensitiveDataFilter masks any field whose name marks it
as sensitive (password, digest, suffix, ...) before the record is emitted.

Architecture:
- LogConfig: Configuration management with validation
- LogFilter: Security filters for sensitive data sanitization
- LoggingContext: Operation context and timing
- LoggerFactory: Logger creation and configuration
- StructuredLogger: Enhanced logger with filtering

Note: This module name intentionally shadows the standard library 'logging'
module inside the pwlens.core namespace.
"""

import logging
import re
import sys
import time
from abc import ABC, abstractmethod
from contextlib import contextmanager, suppress
from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4

import structlog
from structlog.contextvars import merge_contextvars

from pwlens.core.enums import Environment, LogFormat, LogLevel
from pwlens.core.errors import ConfigurationError, ValidationError

# =====================================================================================
# CONFIGURATION
# =====================================================================================


@dataclass
class LogConfig:
    """
    Logging configuration with validation and environment defaults.

    Usage Example:
        config = LogConfig(
            level=LogLevel.INFO,
            format=LogFormat.JSON,
            environment=Environment.PRODUCTION,
        )
    """

    level: LogLevel = field(default=LogLevel.INFO)
    format: LogFormat = field(default=LogFormat.JSON)
    environment: Environment = field(default=Environment.DEVELOPMENT)

    enable_timestamps: bool = field(default=True)
    enable_caller_info: bool = field(default=False)
    enable_exception_info: bool = field(default=True)
    enable_context_tracking: bool = field(default=True)

    enable_sensitive_data_filtering: bool = field(default=True)
    truncate_long_messages: bool = field(default=True)
    max_message_length: int = field(default=10000)

    def __post_init__(self):
        """Post-initialization validation and setup."""
        self.validate()
        self.apply_environment_defaults()

    def validate(self) -> None:
        """
        Validate logging configuration parameters.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if self.max_message_length < 1000:
            raise ConfigurationError(
                "Maximum message length must be at least 1000 characters",
                config_key="max_message_length",
            )

    def apply_environment_defaults(self) -> None:
        """Apply environment-specific defaults."""
        if self.environment.is_development:
            self.format = LogFormat.CONSOLE
            self.enable_caller_info = True

        elif self.environment.is_testing:
            self.level = LogLevel.WARNING
            self.format = LogFormat.PLAIN
            self.enable_context_tracking = False

        elif self.environment.is_production:
            self.format = LogFormat.JSON
            self.enable_caller_info = False
            # Never allow sensitive data in production logs
            self.enable_sensitive_data_filtering = True

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "level": self.level.level_name,
            "format": self.format.value,
            "environment": self.environment.value,
            "enable_timestamps": self.enable_timestamps,
            "enable_caller_info": self.enable_caller_info,
            "enable_context_tracking": self.enable_context_tracking,
            "enable_sensitive_data_filtering": self.enable_sensitive_data_filtering,
            "max_message_length": self.max_message_length,
        }


# =====================================================================================
# SECURITY FILTERS
# =====================================================================================


class LogFilter(ABC):
    """Abstract base class for log filtering and sanitization."""

    @abstractmethod
    def filter(self, record: dict[str, Any]) -> dict[str, Any]:
        """
        Filter and sanitize log record.

        Args:
            record: Log record to filter

        Returns:
            dict[str, Any]: Filtered log record
        """

    @abstractmethod
    def should_skip(self, record: dict[str, Any]) -> bool:
        """
        Determine if record should be skipped entirely.

        Args:
            record: Log record to evaluate

        Returns:
            bool: True if record should be skipped
        """


class SensitiveDataFilter(LogFilter):
    """
    Filter for sanitizing sensitive data in log records.

    Masks values of fields whose names identify password material, hash
    digests or hash suffixes, and credentials in general.
    """

    def __init__(self, mask_char: str = "*", preserve_length: bool = False):
        """
        Initialize sensitive data filter.

        Args:
            mask_char: Character to use for masking
            preserve_length: Whether to preserve original length when masking
        """
        self.mask_char = mask_char
        self.preserve_length = preserve_length

        self.sensitive_patterns = [
            re.compile(r"password", re.IGNORECASE),
            re.compile(r"passphrase", re.IGNORECASE),
            re.compile(r"digest", re.IGNORECASE),
            re.compile(r"suffix", re.IGNORECASE),
            re.compile(r"token", re.IGNORECASE),
            re.compile(r"secret", re.IGNORECASE),
            re.compile(r"credential", re.IGNORECASE),
        ]

    def filter(self, record: dict[str, Any]) -> dict[str, Any]:
        """Filter and sanitize log record."""
        filtered_record = {}

        for key, value in record.items():
            if self._is_sensitive_field(key):
                filtered_record[key] = self._mask_value(value)
            elif isinstance(value, dict):
                filtered_record[key] = self.filter(value)
            else:
                filtered_record[key] = value

        return filtered_record

    def should_skip(self, record: dict[str, Any]) -> bool:
        """Sensitive records are masked, never dropped."""
        return False

    def _is_sensitive_field(self, field_name: str) -> bool:
        """Check if field name indicates sensitive data."""
        return any(pattern.search(field_name) for pattern in self.sensitive_patterns)

    def _mask_value(self, value: Any) -> str | None:
        """Mask sensitive value."""
        if value is None:
            return None

        value_str = str(value)

        if self.preserve_length:
            return self.mask_char * len(value_str)
        return f"{self.mask_char * 3}[MASKED]"


class MessageLengthFilter(LogFilter):
    """Filter for truncating overly long log messages."""

    def __init__(
        self, max_length: int = 10000, truncation_suffix: str = "... [TRUNCATED]"
    ):
        self.max_length = max_length
        self.truncation_suffix = truncation_suffix

    def filter(self, record: dict[str, Any]) -> dict[str, Any]:
        """Filter and truncate long messages."""
        filtered_record = record.copy()

        message = record.get("message", "")
        if isinstance(message, str) and len(message) > self.max_length:
            truncated_length = self.max_length - len(self.truncation_suffix)
            filtered_record["message"] = (
                message[:truncated_length] + self.truncation_suffix
            )
            filtered_record["original_message_length"] = len(message)
            filtered_record["message_truncated"] = True

        return filtered_record

    def should_skip(self, record: dict[str, Any]) -> bool:
        """Never skip records, just truncate."""
        return False


# =====================================================================================
# CONTEXT MANAGEMENT
# =====================================================================================


class LoggingContext:
    """Operation-scoped logging context with duration tracking."""

    def __init__(self):
        self._context_stack: list[dict[str, Any]] = []
        self._operation_timings: dict[str, list[float]] = {}

    @contextmanager
    def operation_context(self, operation_name: str, **kwargs: Any):
        """
        Context manager for operation-scoped logging context.

        Args:
            operation_name: Name of the operation
            **kwargs: Additional context variables
        """
        operation_id = uuid4()
        start_time = time.perf_counter()

        context = {
            "operation_name": operation_name,
            "operation_id": str(operation_id),
            **kwargs,
        }

        self._context_stack.append(context)
        structlog.contextvars.bind_contextvars(**context)

        try:
            yield operation_id
        finally:
            duration = time.perf_counter() - start_time

            timings = self._operation_timings.setdefault(operation_name, [])
            timings.append(duration)
            # Keep only last 100 timings per operation
            if len(timings) > 100:
                del timings[:-100]

            if self._context_stack:
                self._context_stack.pop()

            structlog.contextvars.unbind_contextvars(*context.keys())

    def get_current_context(self) -> dict[str, Any]:
        """Get current logging context."""
        context: dict[str, Any] = {}
        for ctx in self._context_stack:
            context.update(ctx)
        return context

    def get_operation_stats(self, operation_name: str) -> dict[str, Any]:
        """Get performance statistics for an operation."""
        timings = self._operation_timings.get(operation_name, [])
        if not timings:
            return {"operation_name": operation_name, "call_count": 0}

        return {
            "operation_name": operation_name,
            "call_count": len(timings),
            "avg_duration": sum(timings) / len(timings),
            "min_duration": min(timings),
            "max_duration": max(timings),
        }


# =====================================================================================
# STRUCTURED LOGGER
# =====================================================================================


class StructuredLogger:
    """Structured logger applying the configured filters before emitting."""

    def __init__(self, name: str, config: LogConfig):
        """
        Initialize structured logger.

        Args:
            name: Logger name
            config: Logging configuration
        """
        self.name = name
        self.config = config
        self.context = LoggingContext()

        self.filters: list[LogFilter] = []
        if config.enable_sensitive_data_filtering:
            self.filters.append(SensitiveDataFilter())
        if config.truncate_long_messages:
            self.filters.append(MessageLengthFilter(config.max_message_length))

        self._logger = structlog.get_logger(name)

        self._log_count = 0
        self._error_count = 0

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        self._log(LogLevel.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(LogLevel.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message."""
        self._log(LogLevel.ERROR, message, **kwargs)
        self._error_count += 1

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log exception with traceback."""
        kwargs["exc_info"] = True
        self.error(message, **kwargs)

    def prepare_record(self, message: str, **kwargs: Any) -> dict[str, Any] | None:
        """Build the filtered record for a message, or None if it is skipped."""
        record = {"message": message, **kwargs}

        if self.config.enable_context_tracking:
            record.update(self.context.get_current_context())

        for filter_instance in self.filters:
            if filter_instance.should_skip(record):
                return None
            record = filter_instance.filter(record)

        return record

    def _log(self, level: LogLevel, message: str, **kwargs: Any) -> None:
        """Internal logging method with filtering and context."""
        if level.priority < self.config.level.priority:
            return

        record = self.prepare_record(message, **kwargs)
        if record is None:
            return

        try:
            getattr(self._logger, level.level_name.lower())(
                record.pop("message"), logger_name=self.name, **record
            )
            self._log_count += 1
        except Exception as e:
            # Fallback to basic logging if structured logging fails
            fallback_logger = logging.getLogger(self.name)
            with suppress(Exception):
                fallback_logger.exception("Structured logging failed: %s", str(e))
            fallback_logger.log(level.to_logging_level(), message)

    def get_stats(self) -> dict[str, Any]:
        """Get logger statistics."""
        return {
            "logger_name": self.name,
            "log_count": self._log_count,
            "error_count": self._error_count,
            "error_rate": self._error_count / max(self._log_count, 1),
        }


# =====================================================================================
# LOGGER FACTORY
# =====================================================================================


class LoggerFactory:
    """Factory for creating and caching structured loggers."""

    def __init__(self, config: LogConfig):
        self.config = config
        self._loggers: dict[str, StructuredLogger] = {}
        self._configured = False

    def configure_logging(self) -> None:
        """Configure global structlog and stdlib logging settings."""
        if self._configured:
            return

        processors = [
            merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
        ]

        if self.config.enable_timestamps:
            processors.append(structlog.processors.TimeStamper(fmt="iso"))

        if self.config.enable_caller_info:
            processors.append(
                structlog.processors.CallsiteParameterAdder(
                    parameters=[
                        structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO,
                        structlog.processors.CallsiteParameter.FUNC_NAME,
                    ]
                )
            )

        if self.config.enable_exception_info:
            processors.extend(
                [
                    structlog.processors.StackInfoRenderer(),
                    structlog.processors.format_exc_info,
                ]
            )

        processors.append(structlog.processors.UnicodeDecoder())

        if self.config.format == LogFormat.JSON:
            processors.append(structlog.processors.JSONRenderer())
        elif self.config.format == LogFormat.CONSOLE:
            processors.append(structlog.dev.ConsoleRenderer(colors=False))
        else:
            processors.append(structlog.processors.KeyValueRenderer())

        structlog.configure(
            processors=processors,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            stream=sys.stdout,
            level=self.config.level.to_logging_level(),
        )

        if self.config.environment.is_production:
            logging.getLogger("httpx").setLevel(logging.WARNING)
            logging.getLogger("httpcore").setLevel(logging.WARNING)

        self._configured = True

    def get_logger(self, name: str) -> StructuredLogger:
        """Get or create structured logger."""
        if not self._configured:
            self.configure_logging()

        if name not in self._loggers:
            self._loggers[name] = StructuredLogger(name, self.config)

        return self._loggers[name]


# =====================================================================================
# GLOBAL CONFIGURATION AND FACTORY
# =====================================================================================

_logger_factory: LoggerFactory | None = None


def configure_logging(config: LogConfig | None = None) -> None:
    """
    Configure global logging system.

    Args:
        config: Logging configuration (derived from settings if not provided)
    """
    global _logger_factory  # noqa: PLW0603

    if config is None:
        try:
            from pwlens.core.config import get_settings

            settings = get_settings()
            config = LogConfig(
                level=settings.log_level,
                environment=settings.environment,
            )
        except (ConfigurationError, ValidationError):
            config = LogConfig()

    _logger_factory = LoggerFactory(config)
    _logger_factory.configure_logging()


def get_logger(name: str) -> StructuredLogger:
    """
    Get structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        StructuredLogger: Configured logger instance
    """
    if _logger_factory is None:
        configure_logging()

    return _logger_factory.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """Add context variables to all subsequent logs in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()


__all__ = [
    "LogConfig",
    "LogFilter",
    "LoggerFactory",
    "LoggingContext",
    "MessageLengthFilter",
    "SensitiveDataFilter",
    "StructuredLogger",
    "clear_context",
    "configure_logging",
    "get_logger",
    "log_context",
]

"""Error classes and error handling for pwlens."""

import logging
import time
import uuid
from enum import Enum
from typing import Any


class ErrorSeverity(Enum):
    """Error severity levels for monitoring and alerting."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class PwLensError(Exception):
    """
    Base exception for all pwlens errors.

    Carries an error code, a severity, structured details and a user-facing
    message. Every instance logs itself on creation with sensitive detail
    keys redacted.
    """

    default_code: str = "ERROR"
    severity: ErrorSeverity = ErrorSeverity.MEDIUM
    retryable: bool = False

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message
        self.code = kwargs.get("code") or self.default_code
        self.details = kwargs.get("details") or {}
        self.error_id = str(uuid.uuid4())
        self.timestamp = time.time()
        self.user_message = kwargs.get("user_message") or message
        self.recovery_hint = kwargs.get("recovery_hint")
        self.__cause__ = kwargs.get("cause")

        self._log_error()

    def _log_error(self) -> None:
        """Log error with structured data."""
        logger = logging.getLogger(f"pwlens.errors.{self.__class__.__name__}")
        log_data = {
            "error_id": self.error_id,
            "code": self.code,
            "error_message": self.message,
            "severity": self.severity.value,
            "retryable": self.retryable,
            "details": self._sanitize_details(self.details),
            "error_class": self.__class__.__name__,
        }

        if self.severity == ErrorSeverity.CRITICAL:
            logger.critical("Critical error occurred", extra=log_data)
        elif self.severity == ErrorSeverity.HIGH:
            logger.error("High severity error", extra=log_data)
        elif self.severity == ErrorSeverity.MEDIUM:
            logger.warning("Medium severity error", extra=log_data)
        else:
            logger.info("Low severity error", extra=log_data)

    def _sanitize_details(self, details: dict) -> dict:
        """Sanitize error details to remove sensitive information."""
        if not details:
            return {}

        sensitive_keys = {"password", "digest", "secret", "token", "credential"}
        sanitized = {}

        for key, value in details.items():
            if any(sensitive in key.lower() for sensitive in sensitive_keys):
                sanitized[key] = "***REDACTED***"
            elif isinstance(value, dict):
                sanitized[key] = self._sanitize_details(value)
            else:
                sanitized[key] = value

        return sanitized

    def to_dict(self, include_details: bool = True) -> dict[str, Any]:
        """Serialize error for callers and logs."""
        data = {
            "error": self.code,
            "message": self.user_message,
            "timestamp": self.timestamp,
        }

        if include_details and self.details:
            data["details"] = self._sanitize_details(self.details)

        if self.recovery_hint:
            data["recovery_hint"] = self.recovery_hint

        if self.retryable:
            data["retryable"] = True

        return data

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class DomainError(PwLensError):
    """Base class for domain errors."""

    default_code = "DOMAIN_ERROR"
    severity = ErrorSeverity.MEDIUM


class ApplicationError(PwLensError):
    """Base class for application layer errors."""

    default_code = "APPLICATION_ERROR"
    severity = ErrorSeverity.MEDIUM


class InfrastructureError(PwLensError):
    """Base class for infrastructure errors."""

    default_code = "INFRASTRUCTURE_ERROR"
    severity = ErrorSeverity.HIGH
    retryable = True


class ValidationError(ApplicationError):
    """Invalid caller input; the message is safe to show to the user."""

    default_code = "VALIDATION_ERROR"
    severity = ErrorSeverity.LOW

    def __init__(self, message: str, field: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        if field:
            self.details["field"] = field
        self.code = self.default_code


class ConfigurationError(InfrastructureError):
    """Configuration error."""

    default_code = "CONFIGURATION_ERROR"
    severity = ErrorSeverity.CRITICAL
    retryable = False

    def __init__(
        self, message: str, config_key: str | None = None, **kwargs: Any
    ) -> None:
        user_message = "Service configuration issue"
        super().__init__(message, user_message=user_message, **kwargs)
        if config_key:
            self.details["config_key"] = config_key
        self.code = self.default_code


class ExternalServiceError(InfrastructureError):
    """External service error."""

    default_code = "EXTERNAL_SERVICE_ERROR"
    severity = ErrorSeverity.HIGH

    def __init__(
        self,
        service: str,
        message: str,
        service_status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        full_message = f"{service} error: {message}"
        user_message = "External service temporarily unavailable"
        recovery_hint = "Please try again in a few moments"
        super().__init__(
            full_message,
            user_message=user_message,
            recovery_hint=recovery_hint,
            **kwargs,
        )
        self.details.update(
            {"service": service, "service_status_code": service_status_code}
        )
        self.code = self.default_code


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "DomainError",
    "ErrorSeverity",
    "ExternalServiceError",
    "InfrastructureError",
    "PwLensError",
    "ValidationError",
]

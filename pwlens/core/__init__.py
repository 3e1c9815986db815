"""Core infrastructure shared by every pwlens module.

Cross-cutting components:
- config: Environment-driven settings dataclasses
- errors: Exception hierarchy with severity and self-logging
- logging: structlog configuration with sensitive-data filtering
- enums: Environment, log level and log format enumerations
"""

from .config import (
    BreachCheckConfig,
    GeneratorConfig,
    HashRateConfig,
    ScoringPolicyConfig,
    Settings,
    get_settings,
)
from .enums import Environment, LogFormat, LogLevel
from .errors import (
    ApplicationError,
    ConfigurationError,
    DomainError,
    ErrorSeverity,
    ExternalServiceError,
    InfrastructureError,
    PwLensError,
    ValidationError,
)
from .logging import LogConfig, configure_logging, get_logger

__all__ = [
    "ApplicationError",
    "BreachCheckConfig",
    "ConfigurationError",
    "DomainError",
    "Environment",
    "ErrorSeverity",
    "ExternalServiceError",
    "GeneratorConfig",
    "HashRateConfig",
    "InfrastructureError",
    "LogConfig",
    "LogFormat",
    "LogLevel",
    "PwLensError",
    "ScoringPolicyConfig",
    "Settings",
    "ValidationError",
    "configure_logging",
    "get_logger",
    "get_settings",
]

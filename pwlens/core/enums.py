"""Core enumerations shared across the pwlens package."""

from enum import Enum


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "dev"
    TESTING = "test"
    STAGING = "staging"
    PRODUCTION = "prod"

    @property
    def is_production(self) -> bool:
        """Check if environment is production."""
        return self == Environment.PRODUCTION

    @property
    def is_development(self) -> bool:
        """Check if environment is development."""
        return self == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """Check if environment is testing."""
        return self == Environment.TESTING


class LogLevel(Enum):
    """Logging levels with priority mapping."""

    DEBUG = ("DEBUG", 10)
    INFO = ("INFO", 20)
    WARNING = ("WARNING", 30)
    ERROR = ("ERROR", 40)
    CRITICAL = ("CRITICAL", 50)

    def __init__(self, level_name: str, priority: int):
        self.level_name = level_name
        self.priority = priority

    def to_logging_level(self) -> int:
        """Convert to standard logging module level."""
        return self.priority


class LogFormat(Enum):
    """Log output format options."""

    JSON = "json"
    CONSOLE = "console"
    PLAIN = "plain"

    def __str__(self) -> str:
        return self.value

"""Application configuration management.

Configuration is plain dataclasses populated from environment variables (with
an optional ``.env`` file) through the EnvironmentLoader, which validates each
value with the utilities in pwlens.utils.validation.

All scoring weights, thresholds and guess rates are policy values rather than
measured constants, so each one can be overridden with a ``PWLENS_*``
variable while the defaults reproduce the reference scoring exactly.

Architecture:
- EnvironmentLoader: Environment variable loading with type conversion
- ScoringPolicyConfig: Penalty/bonus weights and thresholds of the combiner
- HashRateConfig: Assumed guesses per second for each hashing scheme
- BreachCheckConfig: Range-lookup endpoint and client behaviour
- GeneratorConfig: Password generator bounds and alphabets
- Settings: Main configuration class aggregating all sections
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Any

from pwlens.core.enums import Environment, LogLevel
from pwlens.core.errors import ConfigurationError
from pwlens.utils.validation import (
    validate_boolean,
    validate_enum,
    validate_float,
    validate_integer,
    validate_string,
    validate_url,
)

ENV_PREFIX = "PWLENS_"

# =====================================================================================
# ENVIRONMENT LOADER
# =====================================================================================


class EnvironmentLoader:
    """
    Environment variable loader with type conversion and validation.

    Values already present in the process environment take precedence over
    values read from the environment file. Keys are looked up with the
    ``PWLENS_`` prefix prepended.
    """

    def __init__(self, env_file: str | None = ".env", prefix: str = ENV_PREFIX):
        """
        Initialize environment loader.

        Args:
            env_file: Optional environment file to load
            prefix: Prefix prepended to every key
        """
        self.env_file = env_file
        self.prefix = prefix
        self._file_values: dict[str, str] = {}
        self._load_env_file()

    def _load_env_file(self) -> None:
        """Load key=value pairs from the environment file if it exists."""
        if not self.env_file or not os.path.exists(self.env_file):
            return

        try:
            with open(self.env_file, encoding="utf-8") as f:
                for raw_line in f:
                    line = raw_line.strip()

                    if not line or line.startswith("#") or "=" not in line:
                        continue

                    key, value = line.split("=", 1)
                    key = key.strip()
                    value = value.strip()

                    if (value.startswith('"') and value.endswith('"')) or (
                        value.startswith("'") and value.endswith("'")
                    ):
                        value = value[1:-1]

                    self._file_values[key] = value

        except OSError as e:
            raise ConfigurationError(
                f"Failed to load environment file {self.env_file}: {e}",
                config_key="env_file",
            ) from e

    def _raw(self, key: str, default: Any = None) -> Any:
        full_key = f"{self.prefix}{key}"
        if full_key in os.environ:
            return os.environ[full_key]
        return self._file_values.get(full_key, default)

    def get_string(
        self, key: str, default: str | None = None, required: bool = False, **kwargs
    ) -> str | None:
        """Get string value from environment."""
        return validate_string(self._raw(key, default), key, required, **kwargs)

    def get_integer(
        self, key: str, default: int | None = None, required: bool = False, **kwargs
    ) -> int | None:
        """Get integer value from environment."""
        return validate_integer(self._raw(key, default), key, required, **kwargs)

    def get_float(
        self, key: str, default: float | None = None, required: bool = False, **kwargs
    ) -> float | None:
        """Get float value from environment."""
        return validate_float(self._raw(key, default), key, required, **kwargs)

    def get_boolean(
        self, key: str, default: bool | None = None, required: bool = False
    ) -> bool | None:
        """Get boolean value from environment."""
        return validate_boolean(self._raw(key, default), key, required)

    def get_enum(
        self,
        key: str,
        enum_class: type[Enum],
        default: Enum | None = None,
        required: bool = False,
    ) -> Enum | None:
        """Get enum value from environment."""
        return validate_enum(self._raw(key, default), enum_class, key, required)

    def get_url(
        self, key: str, default: str | None = None, required: bool = False, **kwargs
    ) -> str | None:
        """Get URL value from environment."""
        return validate_url(self._raw(key, default), key, required, **kwargs)


# =====================================================================================
# CONFIGURATION SECTIONS
# =====================================================================================


@dataclass
class ScoringPolicyConfig:
    """Penalty and bonus policy applied on top of the baseline score."""

    # Penalties, applied in this order, each clamped at min_score
    dictionary_penalty: float = 1.5
    keyboard_penalty: float = 1.2
    ngram_penalty: float = 1.0
    sequential_penalty: float = 0.8
    repeated_penalty: float = 0.7
    short_length_penalty: float = 0.5

    # Bonuses, applied in this order, each clamped at max_score
    long_length_bonus: float = 1.0
    high_entropy_bonus: float = 1.0
    all_classes_bonus: float = 1.0
    low_ngram_bonus: float = 0.5

    # Thresholds
    short_length_threshold: int = 8
    long_length_threshold: int = 16
    high_entropy_threshold: float = 60.0
    high_ngram_threshold: float = 50.0
    low_ngram_threshold: float = 20.0
    low_entropy_feedback_threshold: float = 30.0

    min_score: int = 0
    max_score: int = 4

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Validate policy values.

        Raises:
            ConfigurationError: If a weight is negative or the score range is empty
        """
        weights = {
            "dictionary_penalty": self.dictionary_penalty,
            "keyboard_penalty": self.keyboard_penalty,
            "ngram_penalty": self.ngram_penalty,
            "sequential_penalty": self.sequential_penalty,
            "repeated_penalty": self.repeated_penalty,
            "short_length_penalty": self.short_length_penalty,
            "long_length_bonus": self.long_length_bonus,
            "high_entropy_bonus": self.high_entropy_bonus,
            "all_classes_bonus": self.all_classes_bonus,
            "low_ngram_bonus": self.low_ngram_bonus,
        }
        for name, weight in weights.items():
            if weight < 0:
                raise ConfigurationError(
                    f"{name} must not be negative", config_key=name
                )

        if self.min_score >= self.max_score:
            raise ConfigurationError(
                "min_score must be lower than max_score", config_key="min_score"
            )

        if self.low_ngram_threshold > self.high_ngram_threshold:
            raise ConfigurationError(
                "low_ngram_threshold must not exceed high_ngram_threshold",
                config_key="low_ngram_threshold",
            )


@dataclass
class HashRateConfig:
    """
    Assumed attacker guess rates per hashing scheme, in guesses per second.

    The defaults are illustrative orders of magnitude, not benchmarks.
    """

    bcrypt: float = 1_000.0
    sha256: float = 1_000_000_000.0
    argon2: float = 500.0

    def __post_init__(self) -> None:
        for name, rate in self.rates().items():
            if rate <= 0:
                raise ConfigurationError(
                    f"Guess rate for {name} must be positive",
                    config_key=f"hash_rate_{name}",
                )

    def rates(self) -> dict[str, float]:
        """Return rates keyed by scheme name."""
        return {"bcrypt": self.bcrypt, "sha256": self.sha256, "argon2": self.argon2}


@dataclass
class BreachCheckConfig:
    """Settings for the k-anonymity breach lookup."""

    api_url: str = "https://api.pwnedpasswords.com"
    connect_timeout: float = 5.0
    read_timeout: float = 10.0
    user_agent: str = "pwlens-breach-check/1.0"
    add_padding: bool = True
    min_password_length: int = 3

    def __post_init__(self) -> None:
        if not self.api_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                "Breach check API URL must be http(s)", config_key="breach_api_url"
            )
        if self.connect_timeout <= 0 or self.read_timeout <= 0:
            raise ConfigurationError(
                "Breach check timeouts must be positive",
                config_key="breach_timeout",
            )


@dataclass
class GeneratorConfig:
    """Password generator bounds and alphabets."""

    default_length: int = 16
    min_length: int = 8
    max_length: int = 128
    uppercase_chars: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    lowercase_chars: str = "abcdefghijklmnopqrstuvwxyz"
    number_chars: str = "0123456789"
    symbol_chars: str = "!@#$%^&*()_+-=[]{}|;:,.<>?"

    def __post_init__(self) -> None:
        if not 1 <= self.min_length <= self.default_length <= self.max_length:
            raise ConfigurationError(
                "Generator lengths must satisfy 1 <= min <= default <= max",
                config_key="generator_length",
            )


# =====================================================================================
# SETTINGS
# =====================================================================================


@dataclass
class Settings:
    """Aggregated application settings."""

    environment: Environment = Environment.DEVELOPMENT
    log_level: LogLevel = LogLevel.INFO
    baseline_max_length: int = 72
    scoring: ScoringPolicyConfig = field(default_factory=ScoringPolicyConfig)
    hash_rates: HashRateConfig = field(default_factory=HashRateConfig)
    breach: BreachCheckConfig = field(default_factory=BreachCheckConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)

    @classmethod
    def from_environment(cls, env_file: str | None = ".env") -> "Settings":
        """
        Build settings from environment variables.

        Args:
            env_file: Environment file to load

        Returns:
            Settings: Validated settings
        """
        env = EnvironmentLoader(env_file)
        scoring_defaults = ScoringPolicyConfig()
        rate_defaults = HashRateConfig()
        breach_defaults = BreachCheckConfig()
        generator_defaults = GeneratorConfig()

        scoring = ScoringPolicyConfig(
            dictionary_penalty=env.get_float(
                "DICTIONARY_PENALTY", scoring_defaults.dictionary_penalty
            ),
            keyboard_penalty=env.get_float(
                "KEYBOARD_PENALTY", scoring_defaults.keyboard_penalty
            ),
            ngram_penalty=env.get_float("NGRAM_PENALTY", scoring_defaults.ngram_penalty),
            sequential_penalty=env.get_float(
                "SEQUENTIAL_PENALTY", scoring_defaults.sequential_penalty
            ),
            repeated_penalty=env.get_float(
                "REPEATED_PENALTY", scoring_defaults.repeated_penalty
            ),
            short_length_penalty=env.get_float(
                "SHORT_LENGTH_PENALTY", scoring_defaults.short_length_penalty
            ),
            long_length_bonus=env.get_float(
                "LONG_LENGTH_BONUS", scoring_defaults.long_length_bonus
            ),
            high_entropy_bonus=env.get_float(
                "HIGH_ENTROPY_BONUS", scoring_defaults.high_entropy_bonus
            ),
            all_classes_bonus=env.get_float(
                "ALL_CLASSES_BONUS", scoring_defaults.all_classes_bonus
            ),
            low_ngram_bonus=env.get_float(
                "LOW_NGRAM_BONUS", scoring_defaults.low_ngram_bonus
            ),
        )

        hash_rates = HashRateConfig(
            bcrypt=env.get_float("HASH_RATE_BCRYPT", rate_defaults.bcrypt),
            sha256=env.get_float("HASH_RATE_SHA256", rate_defaults.sha256),
            argon2=env.get_float("HASH_RATE_ARGON2", rate_defaults.argon2),
        )

        breach = BreachCheckConfig(
            api_url=env.get_url(
                "BREACH_API_URL", breach_defaults.api_url, schemes=["http", "https"]
            ),
            connect_timeout=env.get_float(
                "BREACH_CONNECT_TIMEOUT", breach_defaults.connect_timeout
            ),
            read_timeout=env.get_float(
                "BREACH_READ_TIMEOUT", breach_defaults.read_timeout
            ),
            user_agent=env.get_string("BREACH_USER_AGENT", breach_defaults.user_agent),
            add_padding=env.get_boolean("BREACH_ADD_PADDING", breach_defaults.add_padding),
            min_password_length=env.get_integer(
                "BREACH_MIN_PASSWORD_LENGTH",
                breach_defaults.min_password_length,
                min_value=1,
            ),
        )

        generator = GeneratorConfig(
            default_length=env.get_integer(
                "GENERATOR_DEFAULT_LENGTH", generator_defaults.default_length
            ),
            min_length=env.get_integer(
                "GENERATOR_MIN_LENGTH", generator_defaults.min_length, min_value=1
            ),
            max_length=env.get_integer(
                "GENERATOR_MAX_LENGTH", generator_defaults.max_length
            ),
        )

        return cls(
            environment=env.get_enum("ENVIRONMENT", Environment, Environment.DEVELOPMENT),
            log_level=env.get_enum("LOG_LEVEL", LogLevel, LogLevel.INFO),
            baseline_max_length=env.get_integer(
                "BASELINE_MAX_LENGTH", 72, min_value=1, max_value=72
            ),
            scoring=scoring,
            hash_rates=hash_rates,
            breach=breach,
            generator=generator,
        )


# =====================================================================================
# FACTORY FUNCTIONS
# =====================================================================================


@lru_cache
def get_settings(env_file: str | None = ".env") -> Settings:
    """
    Get cached settings instance.

    Args:
        env_file: Environment file to load

    Returns:
        Settings: Application settings
    """
    return Settings.from_environment(env_file)


__all__ = [
    "BreachCheckConfig",
    "EnvironmentLoader",
    "GeneratorConfig",
    "HashRateConfig",
    "ScoringPolicyConfig",
    "Settings",
    "get_settings",
]

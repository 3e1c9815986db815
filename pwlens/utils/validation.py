"""Validation utilities for configuration loading.

Static validators used by the environment loader to convert raw environment
strings into typed, range-checked configuration values. Every failure raises
ValidationError naming the offending field.
"""

from enum import Enum
from typing import Any
from urllib.parse import urlparse

from pwlens.core.errors import ValidationError


class ConfigValidationUtils:
    """
    Configuration validation utilities for environment loading.

    Provides static methods for validating configuration values with type
    checking, range validation and error handling.
    """

    @staticmethod
    def validate_string(
        value: Any,
        field_name: str,
        required: bool = True,
        min_length: int = 0,
        max_length: int | None = None,
    ) -> str | None:
        """
        Validate string value.

        Args:
            value: Value to validate
            field_name: Field name for error messages
            required: Whether field is required
            min_length: Minimum string length
            max_length: Maximum string length

        Returns:
            str | None: Validated string value

        Raises:
            ValidationError: If validation fails
        """
        if value is None or value == "":
            if required:
                raise ValidationError(f"{field_name} is required", field=field_name)
            return None

        str_value = str(value) if not isinstance(value, str) else value
        str_value = str_value.strip()

        if min_length > 0 and len(str_value) < min_length:
            raise ValidationError(
                f"{field_name} must be at least {min_length} characters",
                field=field_name,
            )

        if max_length and len(str_value) > max_length:
            raise ValidationError(
                f"{field_name} must be at most {max_length} characters",
                field=field_name,
            )

        return str_value

    @staticmethod
    def validate_integer(
        value: Any,
        field_name: str,
        required: bool = True,
        min_value: int | None = None,
        max_value: int | None = None,
    ) -> int | None:
        """
        Validate integer value with range checks.

        Raises:
            ValidationError: If validation fails
        """
        if value is None or value == "":
            if required:
                raise ValidationError(f"{field_name} is required", field=field_name)
            return None

        try:
            int_value = int(value)
        except (ValueError, TypeError) as e:
            raise ValidationError(
                f"{field_name} must be a valid integer", field=field_name, cause=e
            ) from e

        if min_value is not None and int_value < min_value:
            raise ValidationError(
                f"{field_name} must be at least {min_value}", field=field_name
            )

        if max_value is not None and int_value > max_value:
            raise ValidationError(
                f"{field_name} must be at most {max_value}", field=field_name
            )

        return int_value

    @staticmethod
    def validate_float(
        value: Any,
        field_name: str,
        required: bool = True,
        min_value: float | None = None,
        max_value: float | None = None,
    ) -> float | None:
        """
        Validate float value with range checks.

        Raises:
            ValidationError: If validation fails
        """
        if value is None or value == "":
            if required:
                raise ValidationError(f"{field_name} is required", field=field_name)
            return None

        try:
            float_value = float(value)
        except (ValueError, TypeError) as e:
            raise ValidationError(
                f"{field_name} must be a valid number", field=field_name, cause=e
            ) from e

        if min_value is not None and float_value < min_value:
            raise ValidationError(
                f"{field_name} must be at least {min_value}", field=field_name
            )

        if max_value is not None and float_value > max_value:
            raise ValidationError(
                f"{field_name} must be at most {max_value}", field=field_name
            )

        return float_value

    @staticmethod
    def validate_boolean(
        value: Any, field_name: str, required: bool = True
    ) -> bool | None:
        """
        Validate boolean value with flexible input handling.

        Raises:
            ValidationError: If validation fails
        """
        if value is None or value == "":
            if required:
                raise ValidationError(f"{field_name} is required", field=field_name)
            return None

        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            value = value.lower().strip()
            if value in ("true", "1", "yes", "on"):
                return True
            if value in ("false", "0", "no", "off"):
                return False
            raise ValidationError(
                f"{field_name} must be a valid boolean value", field=field_name
            )

        if isinstance(value, int):
            return bool(value)

        raise ValidationError(
            f"{field_name} must be a valid boolean value", field=field_name
        )

    @staticmethod
    def validate_enum(
        value: Any, enum_class: type[Enum], field_name: str, required: bool = True
    ) -> Enum | None:
        """
        Validate enum value with case-insensitive matching on name or value.

        Tuple-valued enums (LogLevel) are matched on their first element.

        Raises:
            ValidationError: If validation fails
        """
        if value is None or value == "":
            if required:
                raise ValidationError(f"{field_name} is required", field=field_name)
            return None

        if isinstance(value, enum_class):
            return value

        if isinstance(value, str):
            value_lower = value.strip().lower()
            for enum_value in enum_class:
                if enum_value.name.lower() == value_lower:
                    return enum_value

                enum_val = enum_value.value
                if isinstance(enum_val, tuple | list):
                    enum_val = enum_val[0]
                if isinstance(enum_val, str) and enum_val.lower() == value_lower:
                    return enum_value

        valid_values = [e.name.lower() for e in enum_class]
        raise ValidationError(
            f"{field_name} must be one of: {', '.join(valid_values)}", field=field_name
        )

    @staticmethod
    def validate_url(
        value: Any,
        field_name: str,
        required: bool = True,
        schemes: list[str] | None = None,
    ) -> str | None:
        """
        Validate URL with scheme checking.

        Raises:
            ValidationError: If validation fails
        """
        if value is None or value == "":
            if required:
                raise ValidationError(f"{field_name} is required", field=field_name)
            return None

        str_value = str(value).strip()
        parsed = urlparse(str_value)

        if not parsed.scheme or not parsed.netloc:
            raise ValidationError(f"{field_name} must be a valid URL", field=field_name)

        if schemes and parsed.scheme not in schemes:
            raise ValidationError(
                f"{field_name} scheme must be one of: {', '.join(schemes)}",
                field=field_name,
            )

        return str_value.rstrip("/")


validate_string = ConfigValidationUtils.validate_string
validate_integer = ConfigValidationUtils.validate_integer
validate_float = ConfigValidationUtils.validate_float
validate_boolean = ConfigValidationUtils.validate_boolean
validate_enum = ConfigValidationUtils.validate_enum
validate_url = ConfigValidationUtils.validate_url


__all__ = [
    "ConfigValidationUtils",
    "validate_boolean",
    "validate_enum",
    "validate_float",
    "validate_integer",
    "validate_string",
    "validate_url",
]

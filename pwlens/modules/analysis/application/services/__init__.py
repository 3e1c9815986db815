"""Analysis application services."""

from .breach_check_service import BreachCheckService
from .password_generator_service import (
    PasswordGeneratorService,
    recommend_usage,
)

__all__ = ["BreachCheckService", "PasswordGeneratorService", "recommend_usage"]

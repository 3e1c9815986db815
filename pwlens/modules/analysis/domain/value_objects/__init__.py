"""Analysis domain value objects."""

from .baseline_estimate import BaselineEstimate
from .breach_check_result import BreachCheckResult
from .character_distribution import CharacterDistribution
from .entropy_point import EntropyPoint
from .generated_password import GeneratedPassword, UsageRecommendation
from .hash_strength import HashStrengthEstimate
from .password_analysis import PasswordAnalysis

__all__ = [
    "BaselineEstimate",
    "BreachCheckResult",
    "CharacterDistribution",
    "EntropyPoint",
    "GeneratedPassword",
    "HashStrengthEstimate",
    "PasswordAnalysis",
    "UsageRecommendation",
]

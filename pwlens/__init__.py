"""pwlens: password strength analysis.

Combines entropy estimation, pattern detection, n-gram predictability and a
baseline guess estimator into a bounded 0-4 score with actionable feedback,
plus an opt-in k-anonymity breach check and a secure password generator.
"""

from pwlens.modules.analysis.application.services import (
    BreachCheckService,
    PasswordGeneratorService,
)
from pwlens.modules.analysis.domain.enums import BreachStatus, HashScheme, StrengthLevel
from pwlens.modules.analysis.domain.services import PasswordAnalyzer, analyze_password
from pwlens.modules.analysis.domain.value_objects import (
    BreachCheckResult,
    GeneratedPassword,
    PasswordAnalysis,
)

__version__ = "0.1.0"

__all__ = [
    "BreachCheckResult",
    "BreachCheckService",
    "BreachStatus",
    "GeneratedPassword",
    "HashScheme",
    "PasswordAnalysis",
    "PasswordAnalyzer",
    "PasswordGeneratorService",
    "StrengthLevel",
    "analyze_password",
]

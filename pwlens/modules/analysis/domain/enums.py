"""Enumerations for the password analysis domain."""

from enum import Enum


class StrengthLevel(Enum):
    """Strength label derived one-to-one from the final score."""

    VERY_WEAK = "very-weak"
    WEAK = "weak"
    FAIR = "fair"
    STRONG = "strong"
    VERY_STRONG = "very-strong"

    @classmethod
    def from_score(cls, score: int) -> "StrengthLevel":
        """Map an integer score in [0, 4] to its label."""
        return _SCORE_TO_STRENGTH[score]

    @property
    def display_name(self) -> str:
        """Human-readable label, e.g. 'Very Strong'."""
        return self.value.replace("-", " ").title()


_SCORE_TO_STRENGTH = {
    0: StrengthLevel.VERY_WEAK,
    1: StrengthLevel.WEAK,
    2: StrengthLevel.FAIR,
    3: StrengthLevel.STRONG,
    4: StrengthLevel.VERY_STRONG,
}


class CharacterClass(Enum):
    """Disjoint character classes; SYMBOL is the catch-all."""

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    NUMBER = "numbers"
    SYMBOL = "symbols"


class HashScheme(Enum):
    """Hashing schemes covered by the brute-force timing model."""

    BCRYPT = "bcrypt"
    SHA256 = "sha256"
    ARGON2 = "argon2"

    @property
    def display_name(self) -> str:
        return {"bcrypt": "Bcrypt", "sha256": "SHA-256", "argon2": "Argon2"}[self.value]


class BreachStatus(Enum):
    """Outcome of a breach lookup. FAILED is never conflated with NOT_FOUND."""

    BREACHED = "breached"
    NOT_FOUND = "not_found"
    FAILED = "failed"

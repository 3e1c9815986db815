"""
Character Distribution Value Object

Counts of each character class in a password.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CharacterDistribution:
    """
    Value object holding per-class character counts.

    The four classes are disjoint and exhaustive, so the counts always sum to
    the password length.
    """

    uppercase: int = 0
    lowercase: int = 0
    numbers: int = 0
    symbols: int = 0

    def __post_init__(self) -> None:
        """Validate counts."""
        if min(self.uppercase, self.lowercase, self.numbers, self.symbols) < 0:
            raise ValueError("Character counts cannot be negative")

    @property
    def total(self) -> int:
        return self.uppercase + self.lowercase + self.numbers + self.symbols

    @property
    def has_uppercase(self) -> bool:
        return self.uppercase > 0

    @property
    def has_lowercase(self) -> bool:
        return self.lowercase > 0

    @property
    def has_numbers(self) -> bool:
        return self.numbers > 0

    @property
    def has_symbols(self) -> bool:
        return self.symbols > 0

    @property
    def classes_present(self) -> int:
        """Number of character classes with at least one character."""
        return sum(
            (self.has_uppercase, self.has_lowercase, self.has_numbers, self.has_symbols)
        )

    @property
    def has_all_classes(self) -> bool:
        return self.classes_present == 4

    def to_dict(self) -> dict[str, Any]:
        return {
            "uppercase": self.uppercase,
            "lowercase": self.lowercase,
            "numbers": self.numbers,
            "symbols": self.symbols,
        }

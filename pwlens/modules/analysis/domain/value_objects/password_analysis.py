"""
Password Analysis Value Object

The composite assessment returned by the analysis engine.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ..enums import HashScheme, StrengthLevel
from .character_distribution import CharacterDistribution
from .entropy_point import EntropyPoint
from .hash_strength import HashStrengthEstimate


@dataclass(frozen=True)
class PasswordAnalysis:
    """
    Value object representing the full strength assessment of one password.

    Built once per input and never mutated. The password itself is not part
    of the value, so an analysis can be logged or rendered without leaking it.
    """

    score: int
    strength: StrengthLevel
    entropy: float
    length: int
    has_uppercase: bool
    has_lowercase: bool
    has_numbers: bool
    has_symbols: bool
    has_repeated_chars: bool
    has_sequential_chars: bool
    has_keyboard_pattern: bool
    has_dictionary_words: bool
    char_distribution: CharacterDistribution
    feedback: tuple[str, ...]
    crack_time: str
    ngram_likelihood: float
    hash_strength: Mapping[HashScheme, HashStrengthEstimate] = field(hash=False)
    entropy_per_character: tuple[EntropyPoint, ...]

    def __post_init__(self) -> None:
        """Validate invariants and freeze container fields."""
        if not 0 <= self.score <= 4:
            raise ValueError("Score must be between 0 and 4")

        if self.strength is not StrengthLevel.from_score(self.score):
            raise ValueError("Strength label does not match score")

        if self.char_distribution.total != self.length:
            raise ValueError("Character distribution must sum to length")

        if len(self.entropy_per_character) != self.length:
            raise ValueError("Entropy curve must have one entry per character")

        if not 0.0 <= self.ngram_likelihood <= 100.0:
            raise ValueError("N-gram likelihood must be between 0 and 100")

        object.__setattr__(self, "feedback", tuple(self.feedback))
        object.__setattr__(
            self, "entropy_per_character", tuple(self.entropy_per_character)
        )
        object.__setattr__(
            self, "hash_strength", MappingProxyType(dict(self.hash_strength))
        )

    @property
    def entropy_level(self) -> str:
        """Get entropy level description."""
        if self.entropy < 28:
            return "Very Low"
        if self.entropy < 36:
            return "Low"
        if self.entropy < 60:
            return "Medium"
        if self.entropy < 80:
            return "Good"
        return "Excellent"

    @property
    def ngram_level(self) -> str:
        """Get predictability description; lower likelihood is better."""
        if self.ngram_likelihood < 20:
            return "Excellent"
        if self.ngram_likelihood < 40:
            return "Good"
        if self.ngram_likelihood < 60:
            return "Fair"
        return "Poor"

    @property
    def is_strong(self) -> bool:
        return self.score >= 3

    def to_dict(self) -> dict[str, Any]:
        """Render with the field names expected by display collaborators."""
        return {
            "score": self.score,
            "strength": self.strength.value,
            "entropy": self.entropy,
            "length": self.length,
            "hasUppercase": self.has_uppercase,
            "hasLowercase": self.has_lowercase,
            "hasNumbers": self.has_numbers,
            "hasSymbols": self.has_symbols,
            "hasRepeatedChars": self.has_repeated_chars,
            "hasSequentialChars": self.has_sequential_chars,
            "hasKeyboardPattern": self.has_keyboard_pattern,
            "hasDictionaryWords": self.has_dictionary_words,
            "charDistribution": self.char_distribution.to_dict(),
            "feedback": list(self.feedback),
            "crackTime": self.crack_time,
            "ngramLikelihood": self.ngram_likelihood,
            "hashStrength": {
                scheme.value: estimate.to_dict()
                for scheme, estimate in self.hash_strength.items()
            },
            "entropyPerCharacter": [
                point.to_dict() for point in self.entropy_per_character
            ],
        }

    def __str__(self) -> str:
        return f"{self.strength.display_name} ({self.score}/4)"

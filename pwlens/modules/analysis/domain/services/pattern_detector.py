"""
Pattern Detector

Independent case-insensitive predicates for weak password constructions.
"""

from dataclasses import dataclass

from ..constants import (
    COMMON_PASSWORD_SUBSTRINGS,
    KEYBOARD_SEQUENCES,
    MIN_REPEAT_RUN,
    PATTERN_WINDOW,
    SEQUENCES,
)


@dataclass(frozen=True)
class PatternSignals:
    """Results of every pattern predicate for one password."""

    repeated: bool = False
    sequential: bool = False
    keyboard: bool = False
    dictionary: bool = False

    @property
    def any_detected(self) -> bool:
        return self.repeated or self.sequential or self.keyboard or self.dictionary


class PatternDetector:
    """Detects repeated runs, sequences, keyboard walks and common words."""

    @staticmethod
    def _windows(password: str) -> list[str]:
        lowered = password.lower()
        return [
            lowered[i : i + PATTERN_WINDOW]
            for i in range(len(lowered) - PATTERN_WINDOW + 1)
        ]

    @staticmethod
    def has_repeated_chars(password: str) -> bool:
        """Check for any character repeated MIN_REPEAT_RUN or more times in a row."""
        lowered = password.lower()
        run = 1
        for previous, current in zip(lowered, lowered[1:]):
            run = run + 1 if current == previous else 1
            if run >= MIN_REPEAT_RUN:
                return True
        return False

    @classmethod
    def has_sequential_chars(cls, password: str) -> bool:
        """Check for alphabet, digit or keyboard-row runs in either direction."""
        return any(
            window in sequence
            for window in cls._windows(password)
            for sequence in SEQUENCES
        )

    @classmethod
    def has_keyboard_pattern(cls, password: str) -> bool:
        """Check for keyboard-row runs in either direction."""
        return any(
            window in row
            for window in cls._windows(password)
            for row in KEYBOARD_SEQUENCES
        )

    @staticmethod
    def has_dictionary_words(password: str) -> bool:
        """Check for common breached-password substrings."""
        lowered = password.lower()
        return any(word in lowered for word in COMMON_PASSWORD_SUBSTRINGS)

    @classmethod
    def detect(cls, password: str) -> PatternSignals:
        """Run every predicate over the password."""
        return PatternSignals(
            repeated=cls.has_repeated_chars(password),
            sequential=cls.has_sequential_chars(password),
            keyboard=cls.has_keyboard_pattern(password),
            dictionary=cls.has_dictionary_words(password),
        )

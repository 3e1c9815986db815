"""
Feedback Generator

Ordered, user-facing recommendations. The order of checks is fixed and every
failing check contributes exactly one message.
"""

from pwlens.core.config import ScoringPolicyConfig

from ..value_objects.character_distribution import CharacterDistribution
from .pattern_detector import PatternSignals

SHORT_LENGTH_MESSAGE = "Use at least 8 characters (12+ recommended)"
MISSING_UPPERCASE_MESSAGE = "Add uppercase letters"
MISSING_LOWERCASE_MESSAGE = "Add lowercase letters"
MISSING_NUMBERS_MESSAGE = "Add numbers"
MISSING_SYMBOLS_MESSAGE = "Add special characters"
REPEATED_MESSAGE = "Avoid repeated characters (e.g. 'aaa')"
SEQUENTIAL_MESSAGE = "Avoid sequential characters (e.g. 'abc', '123')"
KEYBOARD_MESSAGE = "Avoid keyboard patterns (e.g. 'qwerty', 'asdf')"
DICTIONARY_MESSAGE = "Avoid common words and passwords"
LOW_ENTROPY_MESSAGE = "Increase randomness: entropy is below 30 bits"
SUCCESS_MESSAGE = "Great password! No obvious weaknesses detected"


class FeedbackGenerator:
    """Builds the recommendation list from detector outputs."""

    def __init__(self, policy: ScoringPolicyConfig | None = None):
        self.policy = policy or ScoringPolicyConfig()

    def generate(
        self,
        length: int,
        entropy: float,
        distribution: CharacterDistribution,
        patterns: PatternSignals,
    ) -> tuple[str, ...]:
        """Return one message per failing check, or the single success message."""
        checks = (
            (length < self.policy.short_length_threshold, SHORT_LENGTH_MESSAGE),
            (not distribution.has_uppercase, MISSING_UPPERCASE_MESSAGE),
            (not distribution.has_lowercase, MISSING_LOWERCASE_MESSAGE),
            (not distribution.has_numbers, MISSING_NUMBERS_MESSAGE),
            (not distribution.has_symbols, MISSING_SYMBOLS_MESSAGE),
            (patterns.repeated, REPEATED_MESSAGE),
            (patterns.sequential, SEQUENTIAL_MESSAGE),
            (patterns.keyboard, KEYBOARD_MESSAGE),
            (patterns.dictionary, DICTIONARY_MESSAGE),
            (entropy < self.policy.low_entropy_feedback_threshold, LOW_ENTROPY_MESSAGE),
        )

        feedback = tuple(message for failed, message in checks if failed)
        return feedback or (SUCCESS_MESSAGE,)

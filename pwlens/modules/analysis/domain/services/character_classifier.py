"""
Character Classifier

Assigns each character of a password to exactly one character class.
"""

from ..constants import DIGIT_CHARS, LOWERCASE_CHARS, UPPERCASE_CHARS
from ..enums import CharacterClass
from ..value_objects.character_distribution import CharacterDistribution


class CharacterClassifier:
    """Classifies characters as uppercase, lowercase, number or symbol."""

    @staticmethod
    def classify_char(char: str) -> CharacterClass:
        """
        Classify a single character.

        Only ASCII letters and digits get their own classes; whitespace and
        every non-ASCII character fall through to SYMBOL.
        """
        if char in UPPERCASE_CHARS:
            return CharacterClass.UPPERCASE
        if char in LOWERCASE_CHARS:
            return CharacterClass.LOWERCASE
        if char in DIGIT_CHARS:
            return CharacterClass.NUMBER
        return CharacterClass.SYMBOL

    @classmethod
    def classify(cls, password: str) -> CharacterDistribution:
        """Count the characters of each class in a password."""
        counts = dict.fromkeys(CharacterClass, 0)
        for char in password:
            counts[cls.classify_char(char)] += 1

        return CharacterDistribution(
            uppercase=counts[CharacterClass.UPPERCASE],
            lowercase=counts[CharacterClass.LOWERCASE],
            numbers=counts[CharacterClass.NUMBER],
            symbols=counts[CharacterClass.SYMBOL],
        )


def classify_characters(password: str) -> CharacterDistribution:
    """Count the characters of each class in a password."""
    return CharacterClassifier.classify(password)

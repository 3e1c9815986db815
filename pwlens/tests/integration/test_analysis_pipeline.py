"""
Integration tests for the full analysis pipeline.

Runs the default analyzer with the real zxcvbn baseline.
"""

import pytest

from pwlens import (
    PasswordGeneratorService,
    StrengthLevel,
    analyze_password,
)
from pwlens.modules.analysis.domain.services.feedback_generator import (
    DICTIONARY_MESSAGE,
)
from pwlens.tests.conftest import RANDOM_LOOKING_PASSWORD


class TestAnalyzePassword:
    """Test analyze_password end to end."""

    def test_random_looking_password(self):
        analysis = analyze_password(RANDOM_LOOKING_PASSWORD)

        assert analysis.score == 4
        assert analysis.strength is StrengthLevel.VERY_STRONG

    def test_common_password(self):
        analysis = analyze_password("password123")

        assert analysis.has_dictionary_words is True
        assert DICTIONARY_MESSAGE in analysis.feedback
        assert analysis.score <= 1
        assert analysis.crack_time

    def test_empty_password(self):
        analysis = analyze_password("")

        assert analysis.score == 0
        assert analysis.strength is StrengthLevel.VERY_WEAK

    @pytest.mark.parametrize(
        "password",
        ["a", "🙂", "correct horse battery staple", "Ab1!" * 500, "\x00\x01"],
    )
    def test_total_over_inputs(self, password):
        analysis = analyze_password(password)

        assert analysis.length == len(password)
        assert 0 <= analysis.score <= 4

    def test_idempotent(self):
        assert analyze_password("Tr0ub4dor&3") == analyze_password("Tr0ub4dor&3")


class TestGeneratorPipeline:
    """Test generation with the default analyzer."""

    def test_full_alphabet_long_password_is_strong(self):
        generated = PasswordGeneratorService().generate(length=32)

        assert generated.analysis.length == 32
        assert generated.analysis.score >= 3
        assert generated.usage.title

"""
Test cases for the score combiner.

Covers sequential clamping of penalties and bonuses, round-half-up and the
strength label table.
"""

import pytest

from pwlens.core.config import ScoringPolicyConfig
from pwlens.modules.analysis.domain.enums import StrengthLevel
from pwlens.modules.analysis.domain.services.pattern_detector import PatternSignals
from pwlens.modules.analysis.domain.services.score_combiner import (
    ScoreCombiner,
    ScoringSignals,
)
from pwlens.modules.analysis.domain.value_objects.character_distribution import (
    CharacterDistribution,
)


def make_signals(
    length: int = 12,
    entropy: float = 40.0,
    ngram_likelihood: float = 30.0,
    patterns: PatternSignals | None = None,
    distribution: CharacterDistribution | None = None,
) -> ScoringSignals:
    """Signals that trigger no penalty or bonus unless overridden."""
    return ScoringSignals(
        length=length,
        entropy=entropy,
        ngram_likelihood=ngram_likelihood,
        patterns=patterns or PatternSignals(),
        distribution=distribution or CharacterDistribution(lowercase=length),
    )


@pytest.fixture
def combiner(scoring_policy):
    return ScoreCombiner(scoring_policy)


class TestPenalties:
    """Test penalty application."""

    def test_no_adjustment(self, combiner):
        assert combiner.combine(2.0, make_signals()) == (2, StrengthLevel.FAIR)

    def test_dictionary_penalty_floors_at_zero(self, combiner):
        signals = make_signals(patterns=PatternSignals(dictionary=True))

        assert combiner.adjusted_score(1.0, signals) == 0.0
        assert combiner.combine(1.0, signals) == (0, StrengthLevel.VERY_WEAK)

    def test_keyboard_penalty(self, combiner):
        signals = make_signals(patterns=PatternSignals(keyboard=True))

        assert combiner.adjusted_score(3.0, signals) == pytest.approx(1.8)

    def test_each_penalty_clamps_running_score(self, combiner):
        signals = make_signals(
            length=16,
            entropy=61.0,
            patterns=PatternSignals(dictionary=True, repeated=True),
        )

        # 1.0 -> 0 (dictionary) -> 0 (repeated) -> 1 (length) -> 2 (entropy)
        assert combiner.adjusted_score(1.0, signals) == pytest.approx(2.0)
        assert combiner.combine(1.0, signals) == (2, StrengthLevel.FAIR)

    def test_high_ngram_threshold_is_exclusive(self, combiner):
        assert combiner.adjusted_score(2.0, make_signals(ngram_likelihood=50.0)) == 2.0
        assert combiner.adjusted_score(2.0, make_signals(ngram_likelihood=60.0)) == 1.0

    def test_short_length_penalty(self, combiner):
        signals = make_signals(length=7)

        assert combiner.adjusted_score(2.0, signals) == pytest.approx(1.5)

    def test_all_penalties(self, combiner):
        signals = make_signals(
            length=5,
            ngram_likelihood=80.0,
            patterns=PatternSignals(
                repeated=True, sequential=True, keyboard=True, dictionary=True
            ),
        )

        assert combiner.combine(4.0, signals) == (0, StrengthLevel.VERY_WEAK)


class TestBonuses:
    """Test bonus application."""

    def test_bonuses_cap_at_four(self, combiner):
        signals = make_signals(
            length=20,
            entropy=86.0,
            ngram_likelihood=0.0,
            distribution=CharacterDistribution(
                uppercase=5, lowercase=5, numbers=5, symbols=5
            ),
        )

        assert combiner.adjusted_score(4.0, signals) == 4.0
        assert combiner.combine(0.0, signals) == (4, StrengthLevel.VERY_STRONG)

    def test_low_ngram_bonus(self, combiner):
        assert combiner.adjusted_score(
            2.0, make_signals(ngram_likelihood=10.0)
        ) == pytest.approx(2.5)

    def test_low_ngram_threshold_is_exclusive(self, combiner):
        assert combiner.adjusted_score(2.0, make_signals(ngram_likelihood=20.0)) == 2.0

    def test_entropy_threshold_is_exclusive(self, combiner):
        assert combiner.adjusted_score(2.0, make_signals(entropy=60.0)) == 2.0
        assert combiner.adjusted_score(2.0, make_signals(entropy=60.1)) == 3.0


class TestRounding:
    """Test final rounding and labels."""

    def test_rounds_half_up(self, combiner):
        # 2.0 + 0.5 low n-gram bonus
        assert combiner.combine(2.0, make_signals(ngram_likelihood=5.0)) == (
            3,
            StrengthLevel.STRONG,
        )

    def test_short_penalty_rounds_back_up(self, combiner):
        assert combiner.combine(2.0, make_signals(length=7)) == (2, StrengthLevel.FAIR)

    def test_rounds_down_below_half(self, combiner):
        signals = make_signals(patterns=PatternSignals(sequential=True))

        assert combiner.combine(2.0, signals) == (1, StrengthLevel.WEAK)

    @pytest.mark.parametrize(
        ("score", "label"),
        [
            (0, StrengthLevel.VERY_WEAK),
            (1, StrengthLevel.WEAK),
            (2, StrengthLevel.FAIR),
            (3, StrengthLevel.STRONG),
            (4, StrengthLevel.VERY_STRONG),
        ],
    )
    def test_label_table(self, combiner, score, label):
        assert combiner.combine(float(score), make_signals()) == (score, label)


class TestCustomPolicy:
    """Test configurable weights."""

    def test_zero_weight_disables_penalty(self):
        combiner = ScoreCombiner(ScoringPolicyConfig(dictionary_penalty=0.0))
        signals = make_signals(patterns=PatternSignals(dictionary=True))

        assert combiner.combine(3.0, signals) == (3, StrengthLevel.STRONG)

    def test_default_policy(self):
        assert ScoreCombiner().policy == ScoringPolicyConfig()

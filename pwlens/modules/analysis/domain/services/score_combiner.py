"""
Score Combiner

Adjusts the baseline score with pattern penalties and diversity bonuses.

Penalties are applied first, each clamping the running score at the floor
before the next is applied. Bonuses follow, each clamping at the ceiling.
The result is rounded half up and mapped to a strength label.
"""

import math
from dataclasses import dataclass

from pwlens.core.config import ScoringPolicyConfig

from ..enums import StrengthLevel
from ..value_objects.character_distribution import CharacterDistribution
from .pattern_detector import PatternSignals


@dataclass(frozen=True)
class ScoringSignals:
    """Inputs of the combiner besides the baseline score."""

    length: int
    entropy: float
    ngram_likelihood: float
    patterns: PatternSignals
    distribution: CharacterDistribution


class ScoreCombiner:
    """Applies the configured penalty and bonus policy to a baseline score."""

    def __init__(self, policy: ScoringPolicyConfig | None = None):
        self.policy = policy or ScoringPolicyConfig()

    def _penalties(self, signals: ScoringSignals) -> list[tuple[bool, float]]:
        policy = self.policy
        return [
            (signals.patterns.dictionary, policy.dictionary_penalty),
            (signals.patterns.keyboard, policy.keyboard_penalty),
            (
                signals.ngram_likelihood > policy.high_ngram_threshold,
                policy.ngram_penalty,
            ),
            (signals.patterns.sequential, policy.sequential_penalty),
            (signals.patterns.repeated, policy.repeated_penalty),
            (
                signals.length < policy.short_length_threshold,
                policy.short_length_penalty,
            ),
        ]

    def _bonuses(self, signals: ScoringSignals) -> list[tuple[bool, float]]:
        policy = self.policy
        return [
            (signals.length >= policy.long_length_threshold, policy.long_length_bonus),
            (signals.entropy > policy.high_entropy_threshold, policy.high_entropy_bonus),
            (signals.distribution.has_all_classes, policy.all_classes_bonus),
            (
                signals.ngram_likelihood < policy.low_ngram_threshold,
                policy.low_ngram_bonus,
            ),
        ]

    def adjusted_score(self, baseline_score: float, signals: ScoringSignals) -> float:
        """Real-valued score after sequentially clamped penalties and bonuses."""
        floor, ceiling = self.policy.min_score, self.policy.max_score
        score = float(baseline_score)

        for triggered, penalty in self._penalties(signals):
            if triggered:
                score = max(floor, score - penalty)

        for triggered, bonus in self._bonuses(signals):
            if triggered:
                score = min(ceiling, score + bonus)

        return score

    def combine(
        self, baseline_score: float, signals: ScoringSignals
    ) -> tuple[int, StrengthLevel]:
        """
        Compute the final integer score and its strength label.

        Args:
            baseline_score: Score in [0, 4] from the baseline estimator
            signals: Detector outputs for the same password

        Returns:
            Tuple of (score, strength)
        """
        score = self.adjusted_score(baseline_score, signals)
        rounded = math.floor(score + 0.5)
        final = min(self.policy.max_score, max(self.policy.min_score, rounded))
        return final, StrengthLevel.from_score(final)

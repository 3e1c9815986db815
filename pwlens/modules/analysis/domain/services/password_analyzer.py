"""
Password Analyzer

Runs every analyzer over a password and assembles the PasswordAnalysis.

The analyzer is synchronous and holds no per-call state, so a single instance
can be shared across threads. It never raises for a ``str`` input.
"""

from functools import lru_cache

from pwlens.core.config import HashRateConfig, ScoringPolicyConfig, get_settings
from pwlens.core.logging import get_logger

from ..constants import EMPTY_CRACK_TIME, EMPTY_PASSWORD_FEEDBACK
from ..enums import StrengthLevel
from ..interfaces.baseline_estimator import IBaselineEstimator
from ..value_objects.password_analysis import PasswordAnalysis
from .character_classifier import CharacterClassifier
from .entropy_estimator import EntropyEstimator
from .feedback_generator import FeedbackGenerator
from .ngram_scorer import NGramScorer
from .pattern_detector import PatternDetector
from .score_combiner import ScoreCombiner, ScoringSignals
from .timing_model import BruteForceTimingModel

logger = get_logger(__name__)


class PasswordAnalyzer:
    """Composite password strength analysis engine."""

    def __init__(
        self,
        baseline_estimator: IBaselineEstimator | None = None,
        scoring_policy: ScoringPolicyConfig | None = None,
        hash_rates: HashRateConfig | None = None,
    ):
        """
        Initialize the analyzer.

        Args:
            baseline_estimator: Source of the initial score and crack-time
                label; defaults to the zxcvbn adapter
            scoring_policy: Penalty and bonus policy
            hash_rates: Guess rates for the timing model
        """
        if baseline_estimator is None:
            from pwlens.modules.analysis.infrastructure.adapters.zxcvbn_baseline_adapter import (  # noqa: E501
                ZxcvbnBaselineAdapter,
            )

            baseline_estimator = ZxcvbnBaselineAdapter()

        self.baseline_estimator = baseline_estimator
        self.scoring_policy = scoring_policy or ScoringPolicyConfig()
        self._combiner = ScoreCombiner(self.scoring_policy)
        self._feedback = FeedbackGenerator(self.scoring_policy)
        self._timing = BruteForceTimingModel(hash_rates)

    def analyze(self, password: str) -> PasswordAnalysis:
        """
        Analyze a password.

        Args:
            password: Password of any length, including empty

        Returns:
            PasswordAnalysis: Fresh assessment of the password
        """
        if not password:
            return self._empty_analysis()

        length = len(password)
        distribution = CharacterClassifier.classify(password)
        entropy = EntropyEstimator.shannon_entropy(password)
        patterns = PatternDetector.detect(password)
        ngram_likelihood = NGramScorer.likelihood(password)
        baseline = self.baseline_estimator.estimate(password)

        score, strength = self._combiner.combine(
            baseline.score,
            ScoringSignals(
                length=length,
                entropy=entropy,
                ngram_likelihood=ngram_likelihood,
                patterns=patterns,
                distribution=distribution,
            ),
        )

        analysis = PasswordAnalysis(
            score=score,
            strength=strength,
            entropy=entropy,
            length=length,
            has_uppercase=distribution.has_uppercase,
            has_lowercase=distribution.has_lowercase,
            has_numbers=distribution.has_numbers,
            has_symbols=distribution.has_symbols,
            has_repeated_chars=patterns.repeated,
            has_sequential_chars=patterns.sequential,
            has_keyboard_pattern=patterns.keyboard,
            has_dictionary_words=patterns.dictionary,
            char_distribution=distribution,
            feedback=self._feedback.generate(length, entropy, distribution, patterns),
            crack_time=baseline.crack_time,
            ngram_likelihood=ngram_likelihood,
            hash_strength=self._timing.estimate(
                EntropyEstimator.charset_pool_size(distribution), length
            ),
            entropy_per_character=EntropyEstimator.entropy_curve(password),
        )

        logger.debug(
            "Password analyzed",
            length=length,
            score=score,
            baseline_score=baseline.score,
        )

        return analysis

    def _empty_analysis(self) -> PasswordAnalysis:
        distribution = CharacterClassifier.classify("")
        return PasswordAnalysis(
            score=0,
            strength=StrengthLevel.VERY_WEAK,
            entropy=0.0,
            length=0,
            has_uppercase=False,
            has_lowercase=False,
            has_numbers=False,
            has_symbols=False,
            has_repeated_chars=False,
            has_sequential_chars=False,
            has_keyboard_pattern=False,
            has_dictionary_words=False,
            char_distribution=distribution,
            feedback=(EMPTY_PASSWORD_FEEDBACK,),
            crack_time=EMPTY_CRACK_TIME,
            ngram_likelihood=0.0,
            hash_strength=self._timing.estimate(0, 0),
            entropy_per_character=(),
        )


@lru_cache(maxsize=1)
def get_default_analyzer() -> PasswordAnalyzer:
    """Analyzer wired from application settings."""
    settings = get_settings()

    from pwlens.modules.analysis.infrastructure.adapters.zxcvbn_baseline_adapter import (  # noqa: E501
        ZxcvbnBaselineAdapter,
    )

    return PasswordAnalyzer(
        baseline_estimator=ZxcvbnBaselineAdapter(settings.baseline_max_length),
        scoring_policy=settings.scoring,
        hash_rates=settings.hash_rates,
    )


def analyze_password(password: str) -> PasswordAnalysis:
    """Analyze a password with the default analyzer."""
    return get_default_analyzer().analyze(password)

"""Analysis domain services."""

from .character_classifier import CharacterClassifier, classify_characters
from .entropy_estimator import EntropyEstimator
from .feedback_generator import FeedbackGenerator
from .ngram_scorer import NGramScorer
from .password_analyzer import PasswordAnalyzer, analyze_password, get_default_analyzer
from .pattern_detector import PatternDetector, PatternSignals
from .score_combiner import ScoreCombiner, ScoringSignals
from .timing_model import BruteForceTimingModel, format_duration, format_rate

__all__ = [
    "BruteForceTimingModel",
    "CharacterClassifier",
    "EntropyEstimator",
    "FeedbackGenerator",
    "NGramScorer",
    "PasswordAnalyzer",
    "PatternDetector",
    "PatternSignals",
    "ScoreCombiner",
    "ScoringSignals",
    "analyze_password",
    "classify_characters",
    "format_duration",
    "format_rate",
    "get_default_analyzer",
]

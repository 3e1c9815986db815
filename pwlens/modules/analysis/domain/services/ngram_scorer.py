"""
N-gram Predictability Scorer

Share of a password's 2- and 3-character windows found in tables of
substrings common in leaked-password corpora, as a percentage.
"""

from ..constants import BIGRAM_WEIGHT, COMMON_BIGRAMS, COMMON_TRIGRAMS, TRIGRAM_WEIGHT


class NGramScorer:
    """Scores how predictable a password is from common n-grams."""

    MAX_LIKELIHOOD = 100.0

    @staticmethod
    def _matches(text: str, size: int, table: frozenset[str]) -> tuple[int, int]:
        """Return (matched windows, total windows) for one window size."""
        windows = [text[i : i + size] for i in range(len(text) - size + 1)]
        return sum(1 for window in windows if window in table), len(windows)

    @classmethod
    def likelihood(cls, password: str) -> float:
        """
        Weighted percentage of windows matching the common tables.

        Trigram matches weigh TRIGRAM_WEIGHT times a bigram match; both window
        sizes count toward the denominator. Shorter than two characters is 0.
        """
        if len(password) < 2:
            return 0.0

        lowered = password.lower()
        bigram_hits, bigram_windows = cls._matches(lowered, 2, COMMON_BIGRAMS)
        trigram_hits, trigram_windows = cls._matches(lowered, 3, COMMON_TRIGRAMS)

        matched_weight = bigram_hits * BIGRAM_WEIGHT + trigram_hits * TRIGRAM_WEIGHT
        total_windows = bigram_windows + trigram_windows

        return min(cls.MAX_LIKELIHOOD, 100.0 * matched_weight / total_windows)

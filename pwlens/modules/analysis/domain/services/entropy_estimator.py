"""
Entropy Estimator

Two randomness measures are produced:

* Shannon entropy of the observed character frequencies, multiplied by the
  password length, so longer passwords with the same diversity score higher.
* Charset-pool entropy, ``length * log2(pool)``, where the pool is the union of
  the character classes present. It assumes uniform random selection from
  that pool and is therefore an optimistic upper bound ("password" counts as
  eight random lowercase letters). It feeds the brute-force timing model and
  is left uncorrected so crack-time figures stay reproducible.
"""

import math
from collections import Counter

from ..constants import (
    DIGIT_POOL_SIZE,
    LOWERCASE_POOL_SIZE,
    SYMBOL_POOL_SIZE,
    UPPERCASE_POOL_SIZE,
)
from ..value_objects.character_distribution import CharacterDistribution
from ..value_objects.entropy_point import EntropyPoint


class EntropyEstimator:
    """Shannon and charset-pool entropy calculations."""

    @staticmethod
    def shannon_entropy(password: str) -> float:
        """Length-weighted Shannon entropy in bits; 0.0 for an empty string."""
        length = len(password)
        if length == 0:
            return 0.0

        return EntropyEstimator._weighted_entropy(Counter(password).values(), length)

    @staticmethod
    def charset_pool_size(distribution: CharacterDistribution) -> int:
        """Size of the union of character classes present."""
        pool_size = 0

        if distribution.has_lowercase:
            pool_size += LOWERCASE_POOL_SIZE
        if distribution.has_uppercase:
            pool_size += UPPERCASE_POOL_SIZE
        if distribution.has_numbers:
            pool_size += DIGIT_POOL_SIZE
        if distribution.has_symbols:
            pool_size += SYMBOL_POOL_SIZE

        return pool_size

    @classmethod
    def charset_entropy(cls, distribution: CharacterDistribution) -> float:
        """Charset-pool entropy estimate in bits."""
        pool_size = cls.charset_pool_size(distribution)
        if pool_size == 0:
            return 0.0

        return distribution.total * math.log2(pool_size)

    @classmethod
    def entropy_curve(cls, password: str) -> tuple[EntropyPoint, ...]:
        """
        Shannon entropy of every prefix of the password.

        Entry ``i`` (1-based) is computed over ``password[:i]`` only. Counts
        are accumulated incrementally so the whole curve is built in one pass.
        """
        counts: Counter[str] = Counter()
        points = []
        for position, char in enumerate(password, start=1):
            counts[char] += 1
            points.append(
                EntropyPoint(
                    position=position,
                    entropy=cls._weighted_entropy(counts.values(), position),
                )
            )

        return tuple(points)

    @staticmethod
    def _weighted_entropy(counts, length: int) -> float:
        entropy = 0.0
        for count in counts:
            probability = count / length
            entropy -= probability * math.log2(probability)

        # Clamp the -0.0 produced by single-symbol inputs
        return max(entropy * length, 0.0)

"""
Hash Strength Value Object

Brute-force duration estimate for a single hashing scheme.
"""

from dataclasses import dataclass
from typing import Any

from ..enums import HashScheme


@dataclass(frozen=True)
class HashStrengthEstimate:
    """
    Value object representing an expected-case brute-force estimate.

    ``log10_seconds`` is None for the empty-password placeholder, where both
    display strings are the "N/A" sentinel.
    """

    scheme: HashScheme
    time: str
    guesses_per_second: str
    log10_seconds: float | None = None

    @property
    def is_placeholder(self) -> bool:
        return self.log10_seconds is None

    def to_dict(self) -> dict[str, Any]:
        return {"time": self.time, "guessesPerSecond": self.guesses_per_second}

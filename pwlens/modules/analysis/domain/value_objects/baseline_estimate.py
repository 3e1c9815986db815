"""
Baseline Estimate Value Object

Opaque score and crack-time label supplied by the baseline estimator.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BaselineEstimate:
    """Initial score in [0, 4] and a human-readable crack time."""

    score: float
    crack_time: str

    def __post_init__(self) -> None:
        if not 0.0 <= self.score <= 4.0:
            raise ValueError("Baseline score must be between 0 and 4")

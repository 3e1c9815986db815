"""
Entropy Point Value Object

One sample of the cumulative entropy curve.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class EntropyPoint:
    """Shannon entropy of the first ``position`` characters of a password."""

    position: int
    entropy: float

    def __post_init__(self) -> None:
        if self.position < 1:
            raise ValueError("Position starts at 1")

        if self.entropy < 0:
            raise ValueError("Entropy cannot be negative")

    def to_dict(self) -> dict[str, Any]:
        return {"position": self.position, "entropy": self.entropy}

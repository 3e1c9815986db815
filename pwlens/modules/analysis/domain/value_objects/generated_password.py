"""
Generated Password Value Objects

A freshly generated password together with its analysis and a usage tier.
"""

from dataclasses import dataclass

from .password_analysis import PasswordAnalysis


@dataclass(frozen=True)
class UsageRecommendation:
    """The kind of accounts a password of a given strength is suited for."""

    title: str
    applications: tuple[str, ...]


@dataclass(frozen=True)
class GeneratedPassword:
    """Generated password plus its assessment."""

    password: str
    analysis: PasswordAnalysis
    usage: UsageRecommendation

    def __repr__(self) -> str:
        # Keep the secret out of reprs and tracebacks
        return (
            f"GeneratedPassword(length={len(self.password)}, "
            f"score={self.analysis.score})"
        )

"""
Brute-force Timing Model

Expected-case crack time for each hashing scheme:

    seconds = pool_size ** length / (guesses_per_second * 2)

The halving models finding the password after searching half the space on
average. Everything is computed in log10 space because ``pool_size ** length``
overflows a float long before passwords get unreasonably long.
"""

import math
from collections.abc import Mapping

from pwlens.core.config import HashRateConfig

from ..constants import (
    NOT_AVAILABLE,
    SCIENTIFIC_YEARS_THRESHOLD,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_YEAR,
)
from ..enums import HashScheme
from ..value_objects.hash_strength import HashStrengthEstimate

_RATE_SUFFIXES = ((1e9, "B"), (1e6, "M"), (1e3, "K"))


def _pluralize(value: int, unit: str) -> str:
    return f"{value} {unit}" if value == 1 else f"{value} {unit}s"


def format_duration(log10_seconds: float) -> str:
    """
    Format a duration given as log10(seconds).

    Switches to scientific notation from SCIENTIFIC_YEARS_THRESHOLD years up.
    """
    if log10_seconds < 0:
        return "less than a second"

    log10_years = log10_seconds - math.log10(SECONDS_PER_YEAR)
    if log10_years >= math.log10(SCIENTIFIC_YEARS_THRESHOLD):
        exponent = math.floor(log10_years)
        mantissa = round(10 ** (log10_years - exponent), 2)
        if mantissa >= 10:
            mantissa /= 10
            exponent += 1
        return f"{mantissa:.2f}e+{exponent:02d} years"

    seconds = 10**log10_seconds
    if seconds < SECONDS_PER_MINUTE:
        return _pluralize(int(seconds), "second")
    if seconds < SECONDS_PER_HOUR:
        return _pluralize(int(seconds // SECONDS_PER_MINUTE), "minute")
    if seconds < SECONDS_PER_DAY:
        return _pluralize(int(seconds // SECONDS_PER_HOUR), "hour")
    if seconds < SECONDS_PER_YEAR:
        return _pluralize(int(seconds // SECONDS_PER_DAY), "day")
    return _pluralize(int(seconds // SECONDS_PER_YEAR), "year")


def format_rate(guesses_per_second: float) -> str:
    """Format a guess rate as a K/M/B-scaled throughput, e.g. ``1B/s``."""
    for threshold, suffix in _RATE_SUFFIXES:
        if guesses_per_second >= threshold:
            return f"{guesses_per_second / threshold:g}{suffix}/s"
    return f"{guesses_per_second:g}/s"


class BruteForceTimingModel:
    """Crack-time estimates for bcrypt, SHA-256 and Argon2."""

    def __init__(self, hash_rates: HashRateConfig | None = None):
        rates = (hash_rates or HashRateConfig()).rates()
        self._rates: dict[HashScheme, float] = {
            scheme: rates[scheme.value] for scheme in HashScheme
        }

    @property
    def rates(self) -> Mapping[HashScheme, float]:
        return dict(self._rates)

    @staticmethod
    def log10_seconds(pool_size: int, length: int, guesses_per_second: float) -> float:
        """log10 of the expected-case crack time in seconds."""
        return length * math.log10(pool_size) - math.log10(guesses_per_second * 2)

    def estimate(
        self, pool_size: int, length: int
    ) -> dict[HashScheme, HashStrengthEstimate]:
        """
        Estimate crack times for every scheme.

        An empty password or empty pool yields "N/A" placeholders rather than
        a computation over zero.
        """
        if length == 0 or pool_size == 0:
            return {
                scheme: HashStrengthEstimate(
                    scheme=scheme, time=NOT_AVAILABLE, guesses_per_second=NOT_AVAILABLE
                )
                for scheme in HashScheme
            }

        estimates = {}
        for scheme, rate in self._rates.items():
            log_seconds = self.log10_seconds(pool_size, length, rate)
            estimates[scheme] = HashStrengthEstimate(
                scheme=scheme,
                time=format_duration(log_seconds),
                guesses_per_second=format_rate(rate),
                log10_seconds=log_seconds,
            )

        return estimates

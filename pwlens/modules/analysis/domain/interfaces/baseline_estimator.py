"""
Baseline Estimator Interface

Port for the pattern-matching guess estimator that supplies the initial score.
"""

from abc import ABC, abstractmethod

from ..value_objects.baseline_estimate import BaselineEstimate


class IBaselineEstimator(ABC):
    """Port for baseline strength estimation."""

    @abstractmethod
    def estimate(self, password: str) -> BaselineEstimate:
        """
        Estimate password strength.

        Args:
            password: Non-empty password to estimate

        Returns:
            BaselineEstimate with a score in [0, 4] and a crack-time label
        """
        ...

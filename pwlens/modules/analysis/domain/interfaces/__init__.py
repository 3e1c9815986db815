"""Analysis domain interfaces."""

from .baseline_estimator import IBaselineEstimator
from .breach_lookup import IBreachLookup

__all__ = ["IBaselineEstimator", "IBreachLookup"]

"""
zxcvbn Baseline Adapter

Supplies the baseline score and crack-time label from the zxcvbn estimator.
"""

from zxcvbn import zxcvbn

from pwlens.core.logging import get_logger
from pwlens.modules.analysis.domain.interfaces.baseline_estimator import (
    IBaselineEstimator,
)
from pwlens.modules.analysis.domain.value_objects.baseline_estimate import (
    BaselineEstimate,
)

logger = get_logger(__name__)

DEFAULT_MAX_LENGTH = 72
CRACK_TIME_SCENARIO = "offline_slow_hashing_1e4_per_second"


class ZxcvbnBaselineAdapter(IBaselineEstimator):
    """Baseline estimator backed by the zxcvbn package."""

    def __init__(self, max_length: int = DEFAULT_MAX_LENGTH):
        """
        Initialize adapter.

        Args:
            max_length: Longer passwords are truncated before estimation;
                zxcvbn rejects inputs over 72 characters
        """
        if not 1 <= max_length <= DEFAULT_MAX_LENGTH:
            raise ValueError(f"max_length must be between 1 and {DEFAULT_MAX_LENGTH}")
        self.max_length = max_length

    def estimate(self, password: str) -> BaselineEstimate:
        """Estimate strength of the first ``max_length`` characters."""
        result = zxcvbn(password[: self.max_length])

        score = min(4, max(0, int(result["score"])))
        crack_time = str(result["crack_times_display"][CRACK_TIME_SCENARIO])

        logger.debug("Baseline estimated", length=len(password), baseline_score=score)

        return BaselineEstimate(score=float(score), crack_time=crack_time)

"""
Global pytest configuration and fixtures for all tests.

Provides:
- Quiet logging for the test environment
- A deterministic baseline estimator
- Analyzer and policy fixtures
- Reference passwords with known properties
"""

import pytest

from pwlens.core.config import ScoringPolicyConfig, get_settings
from pwlens.core.enums import Environment
from pwlens.core.logging import LogConfig, configure_logging
from pwlens.modules.analysis.domain.interfaces.baseline_estimator import (
    IBaselineEstimator,
)
from pwlens.modules.analysis.domain.services.password_analyzer import (
    PasswordAnalyzer,
)
from pwlens.modules.analysis.domain.value_objects.baseline_estimate import (
    BaselineEstimate,
)

# 20 distinct characters from all four classes, no sequences, keyboard runs,
# dictionary words or common n-grams
RANDOM_LOOKING_PASSWORD = "Xk9#mQ2$vL7!pR4&zT8w"

# SHA-1 of "password"
PASSWORD_SHA1 = "5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8"


class StubBaselineEstimator(IBaselineEstimator):
    """Baseline estimator returning a fixed score and recording call lengths."""

    def __init__(self, score: float = 2.0, crack_time: str = "3 hours"):
        self.score = score
        self.crack_time = crack_time
        self.calls: list[int] = []

    def estimate(self, password: str) -> BaselineEstimate:
        self.calls.append(len(password))
        return BaselineEstimate(score=self.score, crack_time=self.crack_time)


@pytest.fixture(scope="session", autouse=True)
def test_logging():
    """Configure logging for the test environment."""
    configure_logging(LogConfig(environment=Environment.TESTING))


@pytest.fixture
def clear_settings_cache():
    """Clear cached settings before and after a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def stub_baseline() -> StubBaselineEstimator:
    return StubBaselineEstimator()


@pytest.fixture
def scoring_policy() -> ScoringPolicyConfig:
    return ScoringPolicyConfig()


@pytest.fixture
def analyzer(stub_baseline, scoring_policy) -> PasswordAnalyzer:
    """Analyzer with a deterministic baseline."""
    return PasswordAnalyzer(
        baseline_estimator=stub_baseline, scoring_policy=scoring_policy
    )

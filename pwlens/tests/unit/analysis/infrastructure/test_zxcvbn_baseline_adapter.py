"""Test cases for the zxcvbn baseline adapter."""

import pytest

from pwlens.modules.analysis.infrastructure.adapters import zxcvbn_baseline_adapter
from pwlens.modules.analysis.infrastructure.adapters.zxcvbn_baseline_adapter import (
    ZxcvbnBaselineAdapter,
)


class TestZxcvbnBaselineAdapter:
    """Test the zxcvbn-backed estimator."""

    def test_common_password_scores_low(self):
        estimate = ZxcvbnBaselineAdapter().estimate("password")

        assert estimate.score <= 1
        assert estimate.crack_time

    def test_score_in_range(self):
        estimate = ZxcvbnBaselineAdapter().estimate("Xk9#mQ2$vL7!pR4&zT8w")

        assert 0 <= estimate.score <= 4

    def test_long_input_truncated(self, monkeypatch):
        seen = []

        def fake_zxcvbn(password):
            seen.append(password)
            return {
                "score": 3,
                "crack_times_display": {
                    "offline_slow_hashing_1e4_per_second": "centuries"
                },
            }

        monkeypatch.setattr(zxcvbn_baseline_adapter, "zxcvbn", fake_zxcvbn)

        estimate = ZxcvbnBaselineAdapter(max_length=10).estimate("a" * 500)

        assert seen == ["a" * 10]
        assert estimate.score == 3.0
        assert estimate.crack_time == "centuries"

    def test_real_long_input(self):
        estimate = ZxcvbnBaselineAdapter().estimate("Ab1!" * 1_000)

        assert 0 <= estimate.score <= 4

    @pytest.mark.parametrize("max_length", [0, 73])
    def test_invalid_max_length(self, max_length):
        with pytest.raises(ValueError):
            ZxcvbnBaselineAdapter(max_length=max_length)

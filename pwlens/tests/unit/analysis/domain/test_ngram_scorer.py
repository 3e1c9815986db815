"""Test cases for n-gram predictability scoring."""

import pytest

from pwlens.modules.analysis.domain.services.ngram_scorer import NGramScorer


class TestNGramLikelihood:
    """Test likelihood arithmetic."""

    @pytest.mark.parametrize("password", ["", "a", "Z"])
    def test_short_input_is_zero(self, password):
        assert NGramScorer.likelihood(password) == 0.0

    def test_single_matching_bigram(self):
        assert NGramScorer.likelihood("ab") == pytest.approx(100.0)

    def test_single_unmatched_bigram(self):
        assert NGramScorer.likelihood("zq") == 0.0

    def test_trigram_weight(self):
        # bigrams th, he match; trigram "the" matches at 1.5x
        # (1 + 1 + 1.5) / (3 bigram windows + 2 trigram windows)
        assert NGramScorer.likelihood("the1") == pytest.approx(70.0)

    def test_case_insensitive(self):
        assert NGramScorer.likelihood("THE1") == NGramScorer.likelihood("the1")

    def test_capped_at_one_hundred(self):
        # (1 + 1 + 1.5) / 3 windows would exceed 100
        assert NGramScorer.likelihood("abc") == 100.0

    def test_random_looking_password(self):
        assert NGramScorer.likelihood("Xk9#mQ2$vL7!pR4&zT8w") == 0.0

    @pytest.mark.parametrize("password", ["password", "123456789", "iloveyou", "Zq"])
    def test_bounded(self, password):
        assert 0.0 <= NGramScorer.likelihood(password) <= 100.0

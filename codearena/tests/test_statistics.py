"""
Tests for submission statistics aggregation.
"""

import math
import pytest
from types import SimpleNamespace

from codearena.models.submission import SubmissionResult
from codearena.services.statistics import aggregate_submissions

PASSED = SubmissionResult.PASSED.value
FAILED = SubmissionResult.FAILED.value


def results(*values):
    return [SimpleNamespace(result=v) for v in values]


class TestAggregateSubmissions:
    """Tests for aggregate_submissions."""

    def test_mixed_results(self):
        """Two passes and one failure."""
        stats = aggregate_submissions(results(PASSED, FAILED, PASSED))

        assert stats.number_of_submissions == 3
        assert stats.percentage_passed == pytest.approx(66.6666666, rel=1e-6)
        assert stats.percentage_failed == pytest.approx(33.3333333, rel=1e-6)

    def test_empty_history_is_zero_not_nan(self):
        """An empty history reports zeros."""
        stats = aggregate_submissions([])

        assert stats.number_of_submissions == 0
        assert stats.percentage_passed == 0.0
        assert stats.percentage_failed == 0.0
        assert not math.isnan(stats.percentage_passed)

    def test_all_passed(self):
        stats = aggregate_submissions(results(PASSED, PASSED))

        assert stats.percentage_passed == 100
        assert stats.percentage_failed == 0

    def test_all_failed(self):
        stats = aggregate_submissions(results(FAILED, FAILED, FAILED, FAILED))

        assert stats.number_of_submissions == 4
        assert stats.percentage_passed == 0
        assert stats.percentage_failed == 100

    @pytest.mark.parametrize("history", [
        (PASSED,),
        (FAILED, PASSED),
        (FAILED, FAILED, PASSED),
        (PASSED, FAILED, FAILED, PASSED, FAILED, PASSED, PASSED),
    ])
    def test_percentages_sum_to_hundred(self, history):
        """Non-empty histories always split 100%."""
        stats = aggregate_submissions(results(*history))

        assert stats.percentage_passed + stats.percentage_failed == pytest.approx(100)

    def test_accepts_enum_results(self):
        """Enum members compare equal to their stored string values."""
        stats = aggregate_submissions(results(SubmissionResult.FAILED, SubmissionResult.PASSED))

        assert stats.percentage_failed == 50

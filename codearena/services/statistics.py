"""
Submission statistics shown on profiles.
"""

from dataclasses import dataclass
from typing import Iterable

from codearena.models.submission import SubmissionResult


@dataclass(frozen=True)
class SubmissionStatistics:
    number_of_submissions: int
    percentage_passed: float
    percentage_failed: float


def aggregate_submissions(submissions: Iterable) -> SubmissionStatistics:
    """
    Count submissions and compute pass/fail percentages.

    An empty history reports 0% passed and 0% failed rather than NaN.

    Args:
        submissions: Objects with a ``result`` attribute (PASSED/FAILED)

    Returns:
        SubmissionStatistics for the given submissions
    """
    results = [s.result for s in submissions]
    total = len(results)
    if total == 0:
        return SubmissionStatistics(0, 0.0, 0.0)

    failed = sum(1 for r in results if r == SubmissionResult.FAILED.value)
    percentage_failed = failed / total * 100
    return SubmissionStatistics(
        number_of_submissions=total,
        percentage_passed=100 - percentage_failed,
        percentage_failed=percentage_failed,
    )

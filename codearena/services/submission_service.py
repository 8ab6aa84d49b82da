"""
Submission evaluation and attempt history.

A developer's first successful attempt at a problem ends the recorded
history: once a problem has a PASSED submission, further attempts are
still judged but no longer stored, so re-solving cannot skew the
attempt statistics.
"""

import logging
from dataclasses import dataclass
from typing import Optional, List

from fastapi import status
from sqlalchemy.orm import Session, joinedload

from codearena.errors import InternalError, NotFound
from codearena.models.problem import Problem
from codearena.models.submission import Submission, SubmissionResult
from codearena.models.user import User, UserRole
from codearena.schemas.common import Pagination
from codearena.services.judge_client import JudgeClient
from codearena.services.role_guard import require_role

logger = logging.getLogger(__name__)


@dataclass
class EvaluationOutcome:
    """
    Result of evaluating a submission.

    Exactly one of ``submission`` (new row, status 201) or ``result``
    (transient verdict for an already solved problem, status 200) is set.
    """
    status_code: int
    submission: Optional[Submission] = None
    result: Optional[SubmissionResult] = None

    @property
    def persisted(self) -> bool:
        return self.submission is not None


@dataclass
class SubmissionHistory:
    submissions: List[Submission]
    number_of_attempts: int
    is_successful: bool


def has_passed(submissions: List[Submission]) -> bool:
    """Whether any submission in the list passed."""
    return any(s.result == SubmissionResult.PASSED.value for s in submissions)


class SubmissionService:
    """
    Service for judging submissions and reading attempt histories.
    """

    def __init__(self, db: Session, judge_client: Optional[JudgeClient] = None):
        self.db = db
        self.judge_client = judge_client

    async def create_submission(
        self,
        user_id: int,
        problem_id: int,
        source_code: str,
        language_id: int,
    ) -> EvaluationOutcome:
        """
        Judge a submission and record it unless the problem is already solved.

        Args:
            user_id: Acting user (must be a developer)
            problem_id: Problem being attempted
            source_code: Program text
            language_id: Judge0 language id

        Returns:
            EvaluationOutcome with either the stored submission or the verdict

        Raises:
            Unauthorized: If the user is not a developer (no judge call is made)
            NotFound: If the user or problem does not exist
            InternalError: If no judge client is configured or the judge service fails
        """
        if self.judge_client is None:
            raise InternalError("no judge client configured for evaluation")

        require_role(self.db, UserRole.DEVELOPER, user_id=user_id)

        problem = self.db.query(Problem).filter(Problem.id == problem_id).first()
        if problem is None:
            raise NotFound("problem does not exist")

        prior_submissions = (
            self.db.query(Submission)
            .filter(Submission.problem_id == problem_id, Submission.user_id == user_id)
            .all()
        )
        already_solved = has_passed(prior_submissions)

        judged = await self.judge_client.judge(
            source_code=source_code,
            language_id=language_id,
            stdin=problem.input,
            expected_output=problem.expected_output,
        )

        if already_solved:
            logger.info(
                f"User {user_id} re-checked solved problem {problem_id}: {judged.verdict.value} (not recorded)"
            )
            return EvaluationOutcome(status_code=status.HTTP_200_OK, result=judged.verdict)

        submission = Submission(
            source_code=source_code,
            language_id=language_id,
            result=judged.verdict.value,
            user_id=user_id,
            problem_id=problem_id,
            submission_token=judged.token,
        )
        self.db.add(submission)
        self.db.commit()
        self.db.refresh(submission)

        logger.info(
            f"Recorded submission {submission.id} for user {user_id} on problem {problem_id}: {submission.result}"
        )
        return EvaluationOutcome(status_code=status.HTTP_201_CREATED, submission=submission)

    def get_own_submissions_for_problem(self, problem_id: int, user_id: int) -> SubmissionHistory:
        """Attempt history of the acting user for one problem."""
        submissions = (
            self.db.query(Submission)
            .filter(Submission.problem_id == problem_id, Submission.user_id == user_id)
            .order_by(Submission.created_at.desc())
            .all()
        )
        return self._history(submissions)

    def get_user_submissions_for_problem(self, problem_id: int, email: str) -> SubmissionHistory:
        """Attempt history of another user (by email) for one problem."""
        user = self.db.query(User).filter(User.email == email).first()
        if user is None:
            raise NotFound("user does not exist")
        return self.get_own_submissions_for_problem(problem_id, user.id)

    def get_all_submissions_for_problem(self, problem_id: int, page: int, page_size: int) -> dict:
        """
        Page through every user's submissions for a problem.

        Returns:
            Dict with ``submissions`` (problem eagerly loaded) and ``pagination``
        """
        query = self.db.query(Submission).filter(Submission.problem_id == problem_id)
        total = query.count()
        submissions = (
            query.options(joinedload(Submission.problem))
            .order_by(Submission.created_at.desc())
            .offset((page - 1) * page_size)
            .limit(page_size)
            .all()
        )
        return {
            "submissions": submissions,
            "pagination": Pagination.build(total, page, page_size),
        }

    @staticmethod
    def _history(submissions: List[Submission]) -> SubmissionHistory:
        return SubmissionHistory(
            submissions=submissions,
            number_of_attempts=len(submissions),
            is_successful=has_passed(submissions),
        )

"""
Submissions API routes.
Judging new submissions and reading attempt histories.
"""

from typing import Union
from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session

from codearena.auth.jwt_handler import get_current_user
from codearena.database import get_db
from codearena.middleware.rate_limiter import limiter, submissions_limit
from codearena.models.user import User
from codearena.schemas.common import ApiResponse
from codearena.schemas.submission import (
    SubmissionCreate,
    SubmissionResponse,
    SubmissionWithProblemResponse,
    VerdictResponse,
    SubmissionHistoryResponse,
    SubmissionPageResponse,
)
from codearena.services.judge_client import JudgeClient, get_judge_client
from codearena.services.submission_service import SubmissionService, SubmissionHistory

router = APIRouter()


def history_to_response(history: SubmissionHistory) -> SubmissionHistoryResponse:
    return SubmissionHistoryResponse(
        submissions=[SubmissionResponse.model_validate(s) for s in history.submissions],
        number_of_attempts=history.number_of_attempts,
        is_successful=history.is_successful,
    )


@router.post("", response_model=ApiResponse[Union[SubmissionResponse, VerdictResponse]])
@limiter.limit(submissions_limit)
async def create_submission(
    request: Request,
    response: Response,
    submission_data: SubmissionCreate,
    db: Session = Depends(get_db),
    judge_client: JudgeClient = Depends(get_judge_client),
    current_user: User = Depends(get_current_user),
):
    """
    Judge a submission (developers only).

    Returns:
        201 with the stored submission, or 200 with the verdict alone when
        the user had already solved the problem (the attempt is not stored)
    """
    outcome = await SubmissionService(db, judge_client).create_submission(
        user_id=current_user.id,
        problem_id=submission_data.problem_id,
        source_code=submission_data.source_code,
        language_id=submission_data.language_id,
    )
    response.status_code = outcome.status_code

    if outcome.persisted:
        data = SubmissionResponse.model_validate(outcome.submission)
    else:
        data = VerdictResponse(result=outcome.result.value)
    return ApiResponse(status_code=outcome.status_code, data=data)


@router.get("/problem/own/{problem_id}", response_model=ApiResponse[SubmissionHistoryResponse])
async def get_own_submissions_for_problem(
    problem_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """The current user's attempts at a problem."""
    history = SubmissionService(db).get_own_submissions_for_problem(problem_id, current_user.id)
    return ApiResponse(status_code=status.HTTP_200_OK, data=history_to_response(history))


@router.get("/problem/other/{problem_id}", response_model=ApiResponse[SubmissionHistoryResponse])
async def get_user_submissions_for_problem(
    problem_id: int,
    email: str = Query(..., min_length=1),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Another user's attempts at a problem, looked up by email."""
    history = SubmissionService(db).get_user_submissions_for_problem(problem_id, email)
    return ApiResponse(status_code=status.HTTP_200_OK, data=history_to_response(history))


@router.get("/problem/{problem_id}", response_model=ApiResponse[SubmissionPageResponse])
async def get_all_submissions_for_problem(
    problem_id: int,
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """Every user's submissions for a problem, paginated."""
    result = SubmissionService(db).get_all_submissions_for_problem(problem_id, page, page_size)
    data = SubmissionPageResponse(
        submissions=[SubmissionWithProblemResponse.model_validate(s) for s in result["submissions"]],
        pagination=result["pagination"],
    )
    return ApiResponse(status_code=status.HTTP_200_OK, data=data)

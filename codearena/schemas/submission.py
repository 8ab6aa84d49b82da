"""
Submission-related Pydantic schemas.
"""

from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field

from codearena.schemas.common import Pagination
from codearena.schemas.problem import ProblemResponse


class SubmissionCreate(BaseModel):
    """Schema for creating a new submission."""
    problem_id: int
    source_code: str = Field(min_length=1)
    language_id: int


class SubmissionResponse(BaseModel):
    """Schema for a stored submission."""
    id: int
    problem_id: int
    user_id: int
    source_code: str
    language_id: int
    result: str
    submission_token: Optional[str]
    created_at: datetime

    class Config:
        from_attributes = True


class SubmissionWithProblemResponse(SubmissionResponse):
    """Submission together with the problem it answers."""
    problem: Optional[ProblemResponse] = None


class VerdictResponse(BaseModel):
    """Verdict of a re-check on an already solved problem (not stored)."""
    result: str


class SubmissionHistoryResponse(BaseModel):
    """A user's attempts at one problem."""
    submissions: List[SubmissionResponse]
    number_of_attempts: int
    is_successful: bool


class SubmissionPageResponse(BaseModel):
    """A page of submissions for a problem."""
    submissions: List[SubmissionWithProblemResponse]
    pagination: Pagination

"""
Pydantic schemas for request/response validation.
"""

from codearena.schemas.common import ApiResponse, Pagination
from codearena.schemas.user import (
    RegisterUserRequest,
    LoginRequest,
    ChangePasswordRequest,
    RegisterAdminRequest,
    UpdateUserRequest,
    UserResponse,
    TokenResponse,
)
from codearena.schemas.problem import ProblemCreate, ProblemUpdate, ProblemResponse, ProblemPageResponse
from codearena.schemas.submission import (
    SubmissionCreate,
    SubmissionResponse,
    SubmissionWithProblemResponse,
    VerdictResponse,
    SubmissionHistoryResponse,
    SubmissionPageResponse,
)
from codearena.schemas.profile import ProfileResponse, ProfilePictureResponse

__all__ = [
    "ApiResponse",
    "Pagination",
    "RegisterUserRequest",
    "LoginRequest",
    "ChangePasswordRequest",
    "RegisterAdminRequest",
    "UpdateUserRequest",
    "UserResponse",
    "TokenResponse",
    "ProblemCreate",
    "ProblemUpdate",
    "ProblemResponse",
    "ProblemPageResponse",
    "SubmissionCreate",
    "SubmissionResponse",
    "SubmissionWithProblemResponse",
    "VerdictResponse",
    "SubmissionHistoryResponse",
    "SubmissionPageResponse",
    "ProfileResponse",
    "ProfilePictureResponse",
]

"""
Business logic services.
"""

from codearena.services.auth_service import AuthService
from codearena.services.judge_client import JudgeClient, JudgeResult
from codearena.services.image_host import ImageHost
from codearena.services.problem_service import ProblemService
from codearena.services.profile_service import ProfileService
from codearena.services.role_guard import require_role
from codearena.services.statistics import SubmissionStatistics, aggregate_submissions
from codearena.services.submission_service import SubmissionService, EvaluationOutcome
from codearena.services.upload_service import UploadService

__all__ = [
    "AuthService",
    "JudgeClient",
    "JudgeResult",
    "ImageHost",
    "ProblemService",
    "ProfileService",
    "require_role",
    "SubmissionStatistics",
    "aggregate_submissions",
    "SubmissionService",
    "EvaluationOutcome",
    "UploadService",
]

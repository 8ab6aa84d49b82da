"""
SQLAlchemy ORM models for the coding challenge platform.
"""

from codearena.models.user import User, UserRole
from codearena.models.problem import Problem
from codearena.models.submission import Submission, SubmissionResult
from codearena.models.profile_picture import ProfilePicture

__all__ = [
    "User",
    "UserRole",
    "Problem",
    "Submission",
    "SubmissionResult",
    "ProfilePicture",
]

"""
Profile views with submission statistics.
"""

from sqlalchemy.orm import Session

from codearena.errors import NotFound
from codearena.models.user import User
from codearena.schemas.profile import ProfileResponse
from codearena.services.statistics import aggregate_submissions


class ProfileService:
    """Builds profile responses for the acting user or any other user."""

    def __init__(self, db: Session):
        self.db = db

    def get_own_profile(self, user_id: int) -> ProfileResponse:
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise NotFound("user does not exist")
        return self._profile(user, include_id=True)

    def get_user_profile(self, email: str) -> ProfileResponse:
        user = self.db.query(User).filter(User.email == email).first()
        if user is None:
            raise NotFound("user does not exist")
        return self._profile(user, include_id=False)

    @staticmethod
    def _profile(user: User, include_id: bool) -> ProfileResponse:
        stats = aggregate_submissions(user.submissions or [])
        return ProfileResponse(
            user_id=user.id if include_id else None,
            email=user.email,
            name=user.name,
            role=user.role,
            profile_image=user.profile_image,
            created_at=user.created_at,
            number_of_submissions=stats.number_of_submissions,
            percentage_passed=stats.percentage_passed,
            percentage_failed=stats.percentage_failed,
        )

"""
Profile API routes.
Profiles include submission statistics.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from codearena.auth.jwt_handler import get_current_user
from codearena.database import get_db
from codearena.models.user import User
from codearena.schemas.common import ApiResponse
from codearena.schemas.profile import ProfileResponse
from codearena.services.profile_service import ProfileService

router = APIRouter()


@router.get("/own", response_model=ApiResponse[ProfileResponse])
async def get_own_profile(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Get the current user's profile and statistics."""
    profile = ProfileService(db).get_own_profile(current_user.id)
    return ApiResponse(status_code=status.HTTP_200_OK, data=profile)


@router.get("/other", response_model=ApiResponse[ProfileResponse])
async def get_user_profile(
    email: str = Query(..., min_length=1),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Get another user's profile and statistics by email."""
    profile = ProfileService(db).get_user_profile(email)
    return ApiResponse(status_code=status.HTTP_200_OK, data=profile)

"""
Authentication API routes.
Registration, login, password change and admin creation.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from codearena.auth.jwt_handler import get_current_user
from codearena.database import get_db
from codearena.models.user import User, UserRole
from codearena.schemas.common import ApiResponse
from codearena.schemas.user import (
    RegisterUserRequest,
    LoginRequest,
    ChangePasswordRequest,
    RegisterAdminRequest,
    UpdateUserRequest,
    UserResponse,
    TokenResponse,
)
from codearena.services.auth_service import AuthService

router = APIRouter()


@router.post("/register", response_model=ApiResponse[UserResponse], status_code=status.HTTP_201_CREATED)
async def register_user(
    request: RegisterUserRequest,
    db: Session = Depends(get_db),
):
    """
    Register a developer or recruiter.

    Returns:
        The new user without the password hash
    """
    user = AuthService(db).register_user(
        email=request.email,
        password=request.password,
        name=request.name,
        role=UserRole(request.role),
        profile_image=request.profile_image,
    )
    return ApiResponse(status_code=status.HTTP_201_CREATED, data=UserResponse.model_validate(user))


@router.post("/login", response_model=ApiResponse[TokenResponse])
async def login(
    request: LoginRequest,
    db: Session = Depends(get_db),
):
    """
    Log in with email and password.

    Returns:
        Bearer access token
    """
    token = AuthService(db).login(request.email, request.password)
    return ApiResponse(status_code=status.HTTP_200_OK, data=TokenResponse(access_token=token))


@router.patch("/change-password", response_model=ApiResponse[None])
async def change_password(
    request: ChangePasswordRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Change the current user's password."""
    AuthService(db).change_password(current_user.email, request.old_password, request.new_password)
    return ApiResponse(status_code=status.HTTP_200_OK, message="password changed successfully")


@router.post("/admin/register", response_model=ApiResponse[UserResponse], status_code=status.HTTP_201_CREATED)
async def register_admin(
    request: RegisterAdminRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Register another admin (admin only).

    Returns:
        The new admin without the password hash
    """
    admin = AuthService(db).register_admin(
        acting_email=current_user.email,
        email=request.email,
        name=request.name,
        password=request.password,
    )
    return ApiResponse(status_code=status.HTTP_201_CREATED, data=UserResponse.model_validate(admin))


@router.patch("/profile", response_model=ApiResponse[UserResponse])
async def update_user(
    request: UpdateUserRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Update the current user's name and/or profile image."""
    user = AuthService(db).update_user(
        current_user.email,
        name=request.name,
        profile_image=request.profile_image,
    )
    return ApiResponse(
        status_code=status.HTTP_200_OK,
        data=UserResponse.model_validate(user),
        message="user profile updated",
    )

"""
User and authentication Pydantic schemas.
"""

import re
from datetime import datetime
from typing import Annotated, Optional, Literal
from pydantic import AfterValidator, BaseModel, EmailStr, Field

# 8-20 characters with a capital letter, a small letter, a digit and no whitespace
PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?!.*\s).{8,20}$")


def check_password_strength(password: str) -> str:
    """Validate a new password against the platform password policy."""
    if len(password) < 8:
        raise ValueError(
            f"password is too short. Minimal length is 8 characters, but actual is {len(password)}"
        )
    if len(password) > 20:
        raise ValueError(
            f"password is too long. Maximal length is 20 characters, but actual is {len(password)}"
        )
    if not PASSWORD_PATTERN.match(password):
        raise ValueError(
            "password must contain the following: a capital letter, a small letter, and a number"
        )
    return password


Password = Annotated[str, AfterValidator(check_password_strength)]


class RegisterUserRequest(BaseModel):
    """Self-service registration for developers and recruiters."""
    email: EmailStr
    name: str = Field(min_length=1)
    password: Password
    role: Literal["DEVELOPER", "RECRUITER"]
    profile_image: Optional[str] = None


class LoginRequest(BaseModel):
    """Schema for login."""
    email: EmailStr
    password: str = Field(min_length=1)


class ChangePasswordRequest(BaseModel):
    """Schema for changing the current user's password."""
    old_password: str = Field(min_length=1)
    new_password: Password


class RegisterAdminRequest(BaseModel):
    """Schema for an admin creating another admin."""
    email: EmailStr
    name: str = Field(min_length=1)
    password: Password


class UpdateUserRequest(BaseModel):
    """Schema for updating the current user's profile."""
    name: Optional[str] = None
    profile_image: Optional[str] = None


class UserResponse(BaseModel):
    """User details without the password hash."""
    id: int
    email: str
    name: str
    role: str
    profile_image: Optional[str]
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TokenResponse(BaseModel):
    """Schema for JWT token response."""
    access_token: str
    token_type: str = "bearer"

"""
Profile and upload Pydantic schemas.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class ProfileResponse(BaseModel):
    """Profile details with submission statistics."""
    user_id: Optional[int] = None
    email: str
    name: str
    role: str
    profile_image: Optional[str]
    created_at: datetime
    number_of_submissions: int
    percentage_passed: float
    percentage_failed: float


class ProfilePictureResponse(BaseModel):
    """Stored profile picture."""
    id: int
    url: str
    created_at: datetime

    class Config:
        from_attributes = True

"""
Problem-related Pydantic schemas.
"""

from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field, field_validator

from codearena.schemas.common import Pagination


class ProblemCreate(BaseModel):
    """Schema for creating a new problem."""
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    example: Optional[str] = None
    input: Optional[str] = None
    expected_output: str = Field(min_length=1)


class ProblemUpdate(BaseModel):
    """Schema for updating a problem. Omitted fields are left unchanged."""
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    example: Optional[str] = None
    input: Optional[str] = None
    expected_output: Optional[str] = Field(default=None, min_length=1)

    @field_validator("title", "description", "expected_output", mode="before")
    @classmethod
    def reject_null(cls, value):
        # Required columns can be omitted but not cleared
        if value is None:
            raise ValueError("may not be null")
        return value


class ProblemResponse(BaseModel):
    """Schema for problem response with full details."""
    id: int
    title: str
    description: str
    example: Optional[str]
    input: Optional[str]
    expected_output: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ProblemPageResponse(BaseModel):
    """A page of problems."""
    problems: List[ProblemResponse]
    pagination: Pagination

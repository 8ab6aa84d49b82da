"""
Problems API routes.
Anyone can read problems; only admins can create or update them.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from codearena.auth.jwt_handler import get_current_user
from codearena.database import get_db
from codearena.models.user import User
from codearena.schemas.common import ApiResponse
from codearena.schemas.problem import (
    ProblemCreate,
    ProblemUpdate,
    ProblemResponse,
    ProblemPageResponse,
)
from codearena.services.problem_service import ProblemService

router = APIRouter()


@router.post("", response_model=ApiResponse[ProblemResponse], status_code=status.HTTP_201_CREATED)
async def create_problem(
    problem_data: ProblemCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Create a new problem (admin only)."""
    problem = ProblemService(db).create_problem(current_user.email, problem_data)
    return ApiResponse(status_code=status.HTTP_201_CREATED, data=ProblemResponse.model_validate(problem))


@router.get("", response_model=ApiResponse[ProblemPageResponse])
async def list_problems(
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """
    List problems with pagination.

    Args:
        page: Page number, starting at 1
        page_size: Number of problems per page
    """
    result = ProblemService(db).list_problems(page, page_size)
    data = ProblemPageResponse(
        problems=[ProblemResponse.model_validate(p) for p in result["problems"]],
        pagination=result["pagination"],
    )
    return ApiResponse(status_code=status.HTTP_200_OK, data=data)


@router.get("/{problem_id}", response_model=ApiResponse[ProblemResponse])
async def get_problem(
    problem_id: int,
    db: Session = Depends(get_db),
):
    """Get a specific problem by ID."""
    problem = ProblemService(db).get_problem(problem_id)
    return ApiResponse(status_code=status.HTTP_200_OK, data=ProblemResponse.model_validate(problem))


@router.patch("/{problem_id}", response_model=ApiResponse[ProblemResponse])
async def update_problem(
    problem_id: int,
    problem_data: ProblemUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Update an existing problem (admin only). Only provided fields change."""
    problem = ProblemService(db).update_problem(current_user.email, problem_id, problem_data)
    return ApiResponse(status_code=status.HTTP_200_OK, data=ProblemResponse.model_validate(problem))

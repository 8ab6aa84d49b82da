"""
Problem management.
Reads are public; creating and updating problems requires an admin.
"""

import logging
from sqlalchemy.orm import Session

from codearena.errors import NotFound
from codearena.models.problem import Problem
from codearena.models.user import UserRole
from codearena.schemas.common import Pagination
from codearena.schemas.problem import ProblemCreate, ProblemUpdate
from codearena.services.role_guard import require_role

logger = logging.getLogger(__name__)


class ProblemService:
    """Service for problem CRUD."""

    def __init__(self, db: Session):
        self.db = db

    def create_problem(self, acting_email: str, data: ProblemCreate) -> Problem:
        require_role(self.db, UserRole.ADMIN, email=acting_email)

        problem = Problem(
            title=data.title,
            description=data.description,
            example=data.example,
            input=data.input,
            expected_output=data.expected_output,
        )
        self.db.add(problem)
        self.db.commit()
        self.db.refresh(problem)

        logger.info(f"Created problem {problem.id} '{problem.title}'")
        return problem

    def get_problem(self, problem_id: int) -> Problem:
        problem = self.db.query(Problem).filter(Problem.id == problem_id).first()
        if problem is None:
            raise NotFound("problem does not exist")
        return problem

    def list_problems(self, page: int, page_size: int) -> dict:
        """
        Page through problems in creation order.

        Returns:
            Dict with ``problems`` and ``pagination``
        """
        total = self.db.query(Problem).count()
        problems = (
            self.db.query(Problem)
            .order_by(Problem.id)
            .offset((page - 1) * page_size)
            .limit(page_size)
            .all()
        )
        return {
            "problems": problems,
            "pagination": Pagination.build(total, page, page_size),
        }

    def update_problem(self, acting_email: str, problem_id: int, data: ProblemUpdate) -> Problem:
        require_role(self.db, UserRole.ADMIN, email=acting_email)
        problem = self.get_problem(problem_id)

        # Update only provided fields
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(problem, field, value)

        self.db.commit()
        self.db.refresh(problem)
        return problem

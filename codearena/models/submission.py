"""
Submission model for judged solutions.

Submissions form an append-only attempt log: one row per judged attempt,
never updated after creation.
"""

from datetime import datetime
from enum import Enum
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from codearena.database import Base


class SubmissionResult(str, Enum):
    """Verdict recorded for a submission."""
    PASSED = "PASSED"
    FAILED = "FAILED"


class Submission(Base):
    """
    A developer's judged attempt at a problem.

    Attributes:
        id: Primary key
        source_code: Submitted program text
        language_id: Judge0 language identifier
        result: Verdict from the judge at creation time
        user_id: Reference to the submitting user
        problem_id: Reference to the problem being solved
        submission_token: Opaque token issued by the judge
        created_at: Submission timestamp
    """
    __tablename__ = "submissions"

    id = Column(Integer, primary_key=True, index=True)
    source_code = Column(Text, nullable=False)
    language_id = Column(Integer, nullable=False)
    result = Column(String(20), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    problem_id = Column(Integer, ForeignKey("problems.id"), nullable=False, index=True)
    submission_token = Column(String(255), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    problem = relationship("Problem", back_populates="submissions")
    user = relationship("User", back_populates="submissions")

    def __repr__(self) -> str:
        return f"<Submission(id={self.id}, result='{self.result}')>"

"""
Problem model for coding challenges.
"""

from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship

from codearena.database import Base


class Problem(Base):
    """
    Coding problem judged against a single stdin / expected output fixture.

    Attributes:
        id: Primary key
        title: Problem title
        description: Full problem statement
        example: Worked example shown to candidates
        input: Stdin passed to the judge for every submission
        expected_output: Output the judge compares against
        created_at: Problem creation timestamp
        updated_at: Last modification timestamp
    """
    __tablename__ = "problems"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    example = Column(Text, nullable=True)
    input = Column(Text, nullable=True)
    expected_output = Column(Text, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationship to submissions
    submissions = relationship("Submission", back_populates="problem")

    def __repr__(self) -> str:
        return f"<Problem(id={self.id}, title='{self.title}')>"

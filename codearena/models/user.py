"""
User model for authentication and profile management.
"""

from datetime import datetime
from enum import Enum
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from codearena.database import Base


class UserRole(str, Enum):
    """Closed set of account roles."""
    DEVELOPER = "DEVELOPER"
    RECRUITER = "RECRUITER"
    ADMIN = "ADMIN"


class User(Base):
    """
    Registered account.

    Users are uniquely identified by their email address. The role is chosen
    at registration (developer or recruiter) and only the admin creation path
    produces admin accounts.

    Attributes:
        id: Primary key
        email: User's email address (unique, required)
        hashed_password: bcrypt hash of the password
        name: Display name
        role: One of UserRole
        profile_image: URL of the profile picture on the image host
        created_at: Account creation timestamp
        updated_at: Last profile or password change
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=UserRole.DEVELOPER.value)
    profile_image = Column(String(512), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationship to submissions
    submissions = relationship("Submission", back_populates="user")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"

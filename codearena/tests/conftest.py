"""
Pytest configuration and fixtures for backend tests.
"""

import os

# Settings are cached on first import, so test configuration goes in first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["JUDGE_POLL_INTERVAL_SECONDS"] = "0"

import pytest
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from codearena.auth.passwords import hash_password
from codearena.database import Base
from codearena.models import User, UserRole, Problem, Submission, SubmissionResult
from codearena.services.judge_client import JudgeClient, JudgeResult

DEFAULT_PASSWORD = "Passw0rd1"


@pytest.fixture
def db_session():
    """In-memory SQLite session with all tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def make_user(db_session):
    """Factory creating users with a known password."""
    def _make_user(email="dev@example.com", role=UserRole.DEVELOPER, name="Test User", password=DEFAULT_PASSWORD):
        user = User(
            email=email,
            hashed_password=hash_password(password),
            name=name,
            role=role.value,
            profile_image="https://example.com/avatar.png",
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user
    return _make_user


@pytest.fixture
def developer(make_user):
    return make_user("dev@example.com", UserRole.DEVELOPER, "Dev User")


@pytest.fixture
def recruiter(make_user):
    return make_user("recruiter@example.com", UserRole.RECRUITER, "Recruiter User")


@pytest.fixture
def admin(make_user):
    return make_user("admin@example.com", UserRole.ADMIN, "Admin User")


@pytest.fixture
def problem(db_session):
    """A stored problem."""
    problem = Problem(
        title="Sum of Two Numbers",
        description="Print the sum of two integers.",
        example="2 3 -> 5",
        input="2 3",
        expected_output="5",
    )
    db_session.add(problem)
    db_session.commit()
    db_session.refresh(problem)
    return problem


@pytest.fixture
def add_submission(db_session):
    """Factory storing a submission with the given result."""
    def _add_submission(user, problem, result=SubmissionResult.FAILED):
        submission = Submission(
            source_code="print(5)",
            language_id=71,
            result=result.value,
            user_id=user.id,
            problem_id=problem.id,
            submission_token="token-existing",
        )
        db_session.add(submission)
        db_session.commit()
        db_session.refresh(submission)
        return submission
    return _add_submission


def judge_returning(verdict: SubmissionResult, token: str = "judge-token-1") -> MagicMock:
    """A JudgeClient double whose judge() returns the given verdict."""
    client = MagicMock(spec=JudgeClient)
    client.judge = AsyncMock(return_value=JudgeResult(
        verdict=verdict,
        token=token,
        status_id=3 if verdict is SubmissionResult.PASSED else 4,
        status_description="Accepted" if verdict is SubmissionResult.PASSED else "Wrong Answer",
    ))
    return client


@pytest.fixture
def passing_judge():
    return judge_returning(SubmissionResult.PASSED)


@pytest.fixture
def failing_judge():
    return judge_returning(SubmissionResult.FAILED)


@pytest.fixture
def make_judge():
    """Factory for judge doubles returning a fixed verdict."""
    return judge_returning

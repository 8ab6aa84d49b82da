"""
Seed data for a fresh database.

Creates the first admin account (admins can only be created by another
admin) and a few sample problems. Safe to run repeatedly.

Usage:
    python -m codearena.seed_data
"""

import logging

from sqlalchemy.orm import Session

from codearena.auth.passwords import hash_password
from codearena.config import Settings, get_settings
from codearena.database import SessionLocal, init_db
from codearena.logging_config import configure_logging
from codearena.models.problem import Problem
from codearena.models.user import User, UserRole

logger = logging.getLogger(__name__)

# Sample problems
PROBLEMS = [
    {
        "title": "Sum of Two Numbers",
        "description": "Read two integers separated by a space and print their sum.",
        "example": "Input: 2 3\nOutput: 5",
        "input": "2 3",
        "expected_output": "5",
    },
    {
        "title": "Reverse a String",
        "description": "Read a single line and print it reversed.",
        "example": "Input: hello\nOutput: olleh",
        "input": "codearena",
        "expected_output": "aneraedoc",
    },
    {
        "title": "FizzBuzz",
        "description": """Read an integer n and print the numbers from 1 to n, one per line.

For multiples of three print "Fizz" instead of the number, for multiples of
five print "Buzz", and for multiples of both print "FizzBuzz".
""",
        "example": "Input: 5\nOutput:\n1\n2\nFizz\n4\nBuzz",
        "input": "15",
        "expected_output": "1\n2\nFizz\n4\nBuzz\nFizz\n7\n8\nFizz\nBuzz\n11\nFizz\n13\n14\nFizzBuzz",
    },
]


def seed_admin(db: Session, settings: Settings) -> bool:
    """Create the bootstrap admin if configured and missing. Returns True if created."""
    if not settings.bootstrap_admin_email or not settings.bootstrap_admin_password:
        logger.info("BOOTSTRAP_ADMIN_EMAIL/PASSWORD not set. Skipping admin seed.")
        return False

    if db.query(User).filter(User.email == settings.bootstrap_admin_email).first():
        logger.info("Bootstrap admin already exists. Skipping.")
        return False

    db.add(User(
        email=settings.bootstrap_admin_email,
        hashed_password=hash_password(settings.bootstrap_admin_password),
        name=settings.bootstrap_admin_name,
        role=UserRole.ADMIN.value,
        profile_image="",
    ))
    db.commit()
    logger.info(f"Created bootstrap admin {settings.bootstrap_admin_email}")
    return True


def seed_problems(db: Session) -> int:
    """Insert sample problems into an empty problems table. Returns the number inserted."""
    existing = db.query(Problem).count()
    if existing > 0:
        logger.info(f"Database already has {existing} problems. Skipping seed.")
        return 0

    for problem_data in PROBLEMS:
        db.add(Problem(**problem_data))
    db.commit()
    logger.info(f"Seeded {len(PROBLEMS)} problems.")
    return len(PROBLEMS)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    init_db()

    db = SessionLocal()
    try:
        seed_admin(db, settings)
        seed_problems(db)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()

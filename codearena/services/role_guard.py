"""
Role checks for privileged operations.

Problem creation/update and admin registration require ADMIN; submitting
code requires DEVELOPER.
"""

from typing import Optional
from sqlalchemy.orm import Session

from codearena.errors import NotFound, Unauthorized
from codearena.models.user import User, UserRole

# One entry per role so every guard site has a message
ROLE_DENIED_MESSAGES = {
    UserRole.ADMIN: "only admins can do that",
    UserRole.DEVELOPER: "only developers can do that",
    UserRole.RECRUITER: "only recruiters can do that",
}


def has_role(user: User, expected_role: UserRole) -> bool:
    """Whether the user's stored role is the expected one."""
    try:
        return UserRole(user.role) is expected_role
    except ValueError:
        return False


def require_role(
    db: Session,
    expected_role: UserRole,
    user_id: Optional[int] = None,
    email: Optional[str] = None,
) -> User:
    """
    Load the acting user and check their role.

    Args:
        db: Database session
        expected_role: Role the operation requires
        user_id: Acting user's id (takes precedence over email)
        email: Acting user's email

    Returns:
        The acting user

    Raises:
        NotFound: If no such user exists
        Unauthorized: If the user's role differs from expected_role
    """
    if user_id is None and email is None:
        raise ValueError("require_role needs a user_id or an email")

    query = db.query(User)
    if user_id is not None:
        user = query.filter(User.id == user_id).first()
    else:
        user = query.filter(User.email == email).first()

    if user is None:
        raise NotFound("user does not exist")

    if not has_role(user, expected_role):
        raise Unauthorized(ROLE_DENIED_MESSAGES[expected_role])

    return user

"""
Account registration, login and password management.
"""

import logging
from typing import Optional
from sqlalchemy.orm import Session

from codearena.auth.jwt_handler import create_user_token
from codearena.auth.passwords import hash_password, verify_password
from codearena.errors import NotFound, Unauthorized
from codearena.models.user import User, UserRole
from codearena.services.role_guard import require_role

logger = logging.getLogger(__name__)


class AuthService:
    """
    Service for creating accounts and issuing access tokens.
    """

    def __init__(self, db: Session):
        """Initialize the auth service with a database session."""
        self.db = db

    def _find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def _create_user(
        self,
        email: str,
        password: str,
        name: str,
        role: UserRole,
        profile_image: Optional[str],
    ) -> User:
        if self._find_by_email(email) is not None:
            raise Unauthorized("user already exists")

        user = User(
            email=email,
            hashed_password=hash_password(password),
            name=name,
            role=role.value,
            profile_image=profile_image,
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)

        logger.info(f"Registered {user.role} account id={user.id}")
        return user

    def register_user(
        self,
        email: str,
        password: str,
        name: str,
        role: UserRole,
        profile_image: Optional[str] = None,
    ) -> User:
        """
        Register a developer or recruiter.

        Raises:
            Unauthorized: If the email is already registered or the role is ADMIN
        """
        if role is UserRole.ADMIN:
            raise Unauthorized("only an admin can add another admin")
        return self._create_user(email, password, name, role, profile_image)

    def login(self, email: str, password: str) -> str:
        """
        Check credentials and issue an access token.

        Raises:
            NotFound: If no account has this email
            Unauthorized: If the password is wrong
        """
        user = self._find_by_email(email)
        if user is None:
            raise NotFound("user does not exist")

        if not verify_password(password, user.hashed_password):
            raise Unauthorized("incorrect password")

        return create_user_token(user)

    def change_password(self, email: str, old_password: str, new_password: str) -> None:
        """Replace the password after checking the old one."""
        user = self._find_by_email(email)
        if user is None:
            raise NotFound("user does not exist")

        if not verify_password(old_password, user.hashed_password):
            raise Unauthorized("incorrect password")

        user.hashed_password = hash_password(new_password)
        self.db.commit()

    def register_admin(self, acting_email: str, email: str, name: str, password: str) -> User:
        """
        Create an admin account on behalf of an existing admin.

        Admins start with an empty profile image; they can add one later.
        """
        require_role(self.db, UserRole.ADMIN, email=acting_email)
        return self._create_user(email, password, name, UserRole.ADMIN, profile_image="")

    def update_user(
        self,
        email: str,
        name: Optional[str] = None,
        profile_image: Optional[str] = None,
    ) -> User:
        """Update display name and/or profile image; omitted fields are kept."""
        user = self._find_by_email(email)
        if user is None:
            raise NotFound("user does not exist")

        if name is not None:
            user.name = name
        if profile_image is not None:
            user.profile_image = profile_image

        self.db.commit()
        self.db.refresh(user)
        return user

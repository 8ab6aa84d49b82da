"""
Tests for role checks.
"""

import pytest

from codearena.errors import NotFound, Unauthorized
from codearena.models.user import UserRole
from codearena.services.role_guard import ROLE_DENIED_MESSAGES, has_role, require_role


class TestRequireRole:
    """Tests for require_role."""

    def test_matching_role_returns_user(self, db_session, admin):
        user = require_role(db_session, UserRole.ADMIN, email=admin.email)
        assert user.id == admin.id

    def test_lookup_by_id(self, db_session, developer):
        user = require_role(db_session, UserRole.DEVELOPER, user_id=developer.id)
        assert user.email == developer.email

    def test_developer_cannot_act_as_admin(self, db_session, developer):
        with pytest.raises(Unauthorized) as exc_info:
            require_role(db_session, UserRole.ADMIN, email=developer.email)

        assert exc_info.value.message == "only admins can do that"
        assert exc_info.value.status_code == 401

    def test_recruiter_cannot_act_as_developer(self, db_session, recruiter):
        with pytest.raises(Unauthorized) as exc_info:
            require_role(db_session, UserRole.DEVELOPER, user_id=recruiter.id)

        assert exc_info.value.message == "only developers can do that"

    def test_missing_user_is_not_found(self, db_session):
        with pytest.raises(NotFound):
            require_role(db_session, UserRole.ADMIN, email="ghost@example.com")

    def test_requires_an_identifier(self, db_session):
        with pytest.raises(ValueError):
            require_role(db_session, UserRole.ADMIN)

    def test_every_role_has_a_message(self):
        assert set(ROLE_DENIED_MESSAGES) == set(UserRole)


class TestHasRole:
    """Tests for has_role."""

    def test_unknown_stored_role(self, developer):
        developer.role = "SUPERUSER"
        assert has_role(developer, UserRole.DEVELOPER) is False
        assert has_role(developer, UserRole.ADMIN) is False

"""
Tests for request schemas and the response envelope.
"""

import pytest
from pydantic import ValidationError

from codearena.schemas.common import ApiResponse, Pagination
from codearena.schemas.user import RegisterUserRequest, check_password_strength


class TestPasswordPolicy:
    @pytest.mark.parametrize("password", ["Passw0rd", "Abcdefg1", "A1b2C3d4E5f6G7h8I9j0"])
    def test_valid(self, password):
        assert check_password_strength(password) == password

    def test_too_short(self):
        with pytest.raises(ValueError, match="too short"):
            check_password_strength("Ab1")

    def test_too_long(self):
        with pytest.raises(ValueError, match="too long"):
            check_password_strength("Abcdefghij1234567890X")

    @pytest.mark.parametrize("password", [
        "password1",   # no capital
        "PASSWORD1",   # no small letter
        "Passwordx",   # no digit
        "Pass word1",  # whitespace
    ])
    def test_missing_character_class(self, password):
        with pytest.raises(ValueError, match="must contain"):
            check_password_strength(password)

    def test_applied_on_registration(self):
        with pytest.raises(ValidationError):
            RegisterUserRequest(email="a@example.com", name="A", password="weak", role="DEVELOPER")


class TestRegisterUserRequest:
    def test_admin_role_rejected(self):
        with pytest.raises(ValidationError):
            RegisterUserRequest(email="a@example.com", name="A", password="Passw0rd", role="ADMIN")

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            RegisterUserRequest(email="not-an-email", name="A", password="Passw0rd", role="DEVELOPER")


class TestEnvelope:
    def test_status_code_serialized_as_camel_case(self):
        body = ApiResponse[int](status_code=200, data=3).model_dump(by_alias=True)

        assert body == {"statusCode": 200, "data": 3, "message": None}

    def test_populate_by_alias(self):
        assert ApiResponse(statusCode=201).status_code == 201


class TestPagination:
    @pytest.mark.parametrize("total,page_size,pages", [
        (0, 10, 0),
        (1, 10, 1),
        (10, 10, 1),
        (11, 10, 2),
        (25, 5, 5),
    ])
    def test_total_pages_rounds_up(self, total, page_size, pages):
        assert Pagination.build(total, 1, page_size).total_pages == pages

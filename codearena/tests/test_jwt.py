"""
Tests for JWT tokens and password hashing.
"""

from datetime import timedelta

from codearena.auth.jwt_handler import create_access_token, create_user_token, verify_token
from codearena.auth.passwords import hash_password, verify_password


class TestTokens:
    def test_round_trip_claims(self, developer):
        payload = verify_token(create_user_token(developer))

        assert payload["sub"] == str(developer.id)
        assert payload["role"] == "DEVELOPER"
        assert "exp" in payload

    def test_expired_token(self):
        token = create_access_token({"sub": "1"}, expires_delta=timedelta(seconds=-1))

        assert verify_token(token) is None

    def test_garbage_token(self):
        assert verify_token("not.a.token") is None


class TestPasswords:
    def test_hash_is_salted(self):
        first = hash_password("Passw0rd1")
        second = hash_password("Passw0rd1")

        assert first != second
        assert verify_password("Passw0rd1", first)
        assert verify_password("Passw0rd1", second)

    def test_wrong_password(self):
        assert not verify_password("Passw0rd2", hash_password("Passw0rd1"))

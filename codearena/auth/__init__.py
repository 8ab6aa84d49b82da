"""
Authentication module for JWT handling and password hashing.
"""

from codearena.auth.jwt_handler import create_access_token, create_user_token, verify_token, get_current_user
from codearena.auth.passwords import hash_password, verify_password

__all__ = [
    "create_access_token",
    "create_user_token",
    "verify_token",
    "get_current_user",
    "hash_password",
    "verify_password",
]

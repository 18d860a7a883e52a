"""Authentication services.

Provides password hashing, secret generation and bearer token management.
"""

from warden_auth.services.jwt_service import JWTService
from warden_auth.services.password_service import PasswordHashingService
from warden_auth.services.secret_generator import (
    ConfirmationTokenGenerator,
    PasswordGenerator,
)

__all__ = [
    "ConfirmationTokenGenerator",
    "JWTService",
    "PasswordGenerator",
    "PasswordHashingService",
]

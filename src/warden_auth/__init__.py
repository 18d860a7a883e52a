"""Warden Auth - bearer token and password infrastructure.

This package is independent of the account domain. It handles:
- Password hashing (bcrypt)
- JWT access/refresh token issuing and verification
- Random confirmation tokens and generated passwords
- Issued token storage (with pluggable persistence)

Architecture:
    warden_auth/
    ├── services/           # Pure logic (hashing, JWT, secret generation)
    ├── repositories/       # Abstract interfaces
    ├── persistence/        # Implementations by technology
    │   └── sqlalchemy/     # SQLAlchemy implementation
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions
"""

from warden_auth.exceptions import (
    AccountLockedError,
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from warden_auth.repositories import IssuedTokenRepository
from warden_auth.schemas import (
    IssuedTokenData,
    RoleClaim,
    TokenIdentity,
    TokenKind,
    TokenSubject,
)
from warden_auth.services import (
    ConfirmationTokenGenerator,
    JWTService,
    PasswordGenerator,
    PasswordHashingService,
)

__all__ = [
    # Services
    "ConfirmationTokenGenerator",
    "JWTService",
    "PasswordGenerator",
    "PasswordHashingService",
    # Repositories (interfaces)
    "IssuedTokenRepository",
    # Schemas
    "IssuedTokenData",
    "RoleClaim",
    "TokenIdentity",
    "TokenKind",
    "TokenSubject",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
    "InvalidCredentialsError",
    "AccountLockedError",
]

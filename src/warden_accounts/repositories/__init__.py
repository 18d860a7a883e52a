"""Repository interfaces for warden_accounts.

SQLAlchemy implementations live in
warden_accounts.infrastructure.persistence.sqlalchemy.
"""

from warden_accounts.repositories.confirmation_token_repository import (
    ConfirmationTokenRepository,
)
from warden_accounts.repositories.role_repository import RoleRepository
from warden_accounts.repositories.user_repository import UserRepository

__all__ = [
    "ConfirmationTokenRepository",
    "RoleRepository",
    "UserRepository",
]

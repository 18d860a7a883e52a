from warden_accounts.infrastructure.persistence.sqlalchemy.repositories.confirmation_token_repository import (
    ConfirmationTokenRepositorySQLAlchemy,
)
from warden_accounts.infrastructure.persistence.sqlalchemy.repositories.role_repository import (
    RoleRepositorySQLAlchemy,
)
from warden_accounts.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "ConfirmationTokenRepositorySQLAlchemy",
    "RoleRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]

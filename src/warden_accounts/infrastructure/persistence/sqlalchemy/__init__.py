"""SQLAlchemy implementation for warden_accounts persistence.

All models share ``AccountsBase.metadata`` with the warden_auth token
tables, so ``create_tables()`` builds the complete schema.
"""

from warden_accounts.infrastructure.persistence.sqlalchemy.base import AccountsBase
from warden_accounts.infrastructure.persistence.sqlalchemy.database import (
    create_tables,
    drop_tables,
    get_db_session,
    get_engine,
    get_session_maker,
    seed_roles,
    unit_of_work,
)
from warden_accounts.infrastructure.persistence.sqlalchemy.models import (
    ConfirmationTokenModel,
    RoleModel,
    UserModel,
)
from warden_accounts.infrastructure.persistence.sqlalchemy.repositories import (
    ConfirmationTokenRepositorySQLAlchemy,
    RoleRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "AccountsBase",
    "ConfirmationTokenModel",
    "ConfirmationTokenRepositorySQLAlchemy",
    "RoleModel",
    "RoleRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
    "create_tables",
    "drop_tables",
    "get_db_session",
    "get_engine",
    "get_session_maker",
    "seed_roles",
    "unit_of_work",
]

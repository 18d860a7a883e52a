"""SQLAlchemy implementation for warden_auth persistence.

Provides:
- AuthBase: Declarative base shared by all warden models
- AccessTokenModel / RefreshTokenModel: issued token tables
- IssuedTokenRepositorySQLAlchemy: Repository implementation
"""

from warden_auth.persistence.sqlalchemy.base import AuthBase
from warden_auth.persistence.sqlalchemy.models import (
    AccessTokenModel,
    RefreshTokenModel,
)
from warden_auth.persistence.sqlalchemy.repositories import (
    IssuedTokenRepositorySQLAlchemy,
)

__all__ = [
    "AccessTokenModel",
    "AuthBase",
    "IssuedTokenRepositorySQLAlchemy",
    "RefreshTokenModel",
]

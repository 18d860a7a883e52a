"""SQLAlchemy base for account models.

Shares AuthBase so the account tables and the issued token tables live in
one metadata.
"""

from warden_auth.persistence.sqlalchemy.base import AuthBase

AccountsBase = AuthBase

__all__ = ["AccountsBase"]

"""Repository interfaces for warden_auth.

This package defines abstract repository interfaces that can be implemented
by different persistence technologies. The SQLAlchemy implementation lives
in warden_auth.persistence.sqlalchemy.
"""

from warden_auth.repositories.issued_token_repository import IssuedTokenRepository

__all__ = ["IssuedTokenRepository"]

from warden_auth.persistence.sqlalchemy.repositories.issued_token_repository import (
    IssuedTokenRepositorySQLAlchemy,
)

__all__ = ["IssuedTokenRepositorySQLAlchemy"]

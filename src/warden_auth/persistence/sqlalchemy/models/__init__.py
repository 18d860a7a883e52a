from warden_auth.persistence.sqlalchemy.models.issued_token_model import (
    AccessTokenModel,
    RefreshTokenModel,
)

__all__ = ["AccessTokenModel", "RefreshTokenModel"]

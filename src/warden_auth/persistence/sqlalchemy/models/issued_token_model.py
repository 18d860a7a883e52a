"""SQLAlchemy models for issued access and refresh tokens."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from warden_auth.persistence.sqlalchemy.base import AuthBase


class IssuedTokenColumns:
    """Columns shared by both token tables.

    user_id carries no FK so warden_auth stays decoupled from the
    users table; the consuming application manages the relationship.
    """

    token_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    token: Mapped[str] = mapped_column(Text, nullable=False)
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )


class AccessTokenModel(IssuedTokenColumns, AuthBase):
    __tablename__ = "access_tokens"

    def __repr__(self) -> str:
        return f"<AccessTokenModel(token_id={self.token_id}, user_id={self.user_id})>"


class RefreshTokenModel(IssuedTokenColumns, AuthBase):
    __tablename__ = "refresh_tokens"

    def __repr__(self) -> str:
        return f"<RefreshTokenModel(token_id={self.token_id}, user_id={self.user_id})>"

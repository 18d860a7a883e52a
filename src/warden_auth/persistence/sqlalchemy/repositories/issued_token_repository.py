"""SQLAlchemy implementation of IssuedTokenRepository.

Access and refresh tokens live in separate tables with the same shape;
the token kind selects the model.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from warden_auth.persistence.sqlalchemy.models import (
    AccessTokenModel,
    RefreshTokenModel,
)
from warden_auth.repositories import IssuedTokenRepository
from warden_auth.schemas import IssuedTokenData, TokenKind

logger = logging.getLogger(__name__)

_MODELS: dict[TokenKind, type[AccessTokenModel] | type[RefreshTokenModel]] = {
    TokenKind.ACCESS: AccessTokenModel,
    TokenKind.REFRESH: RefreshTokenModel,
}


class IssuedTokenRepositorySQLAlchemy(IssuedTokenRepository):
    """SQLAlchemy implementation of IssuedTokenRepository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _to_data(
        model: AccessTokenModel | RefreshTokenModel,
        kind: TokenKind,
    ) -> IssuedTokenData:
        return IssuedTokenData(
            token_id=model.token_id,
            user_id=model.user_id,
            token=model.token,
            expires_at=model.expires_at,
            kind=kind,
        )

    async def save(
        self,
        kind: TokenKind,
        user_id: int,
        token: str,
        expires_at: datetime,
    ) -> IssuedTokenData:
        """
        Persist an issued token.

        Parameters
        ----------
        kind
            Selects the access or refresh table
        user_id
            Owner of the token
        token
            Encoded JWT
        expires_at
            Expiry copied from the token's ``exp`` claim

        Returns
        -------
        The stored token with its generated id
        """
        model = _MODELS[kind](user_id=user_id, token=token, expires_at=expires_at)
        self._session.add(model)
        await self._session.flush()
        logger.debug("Stored %s token %s for user %s", kind.value, model.token_id, user_id)
        return self._to_data(model, kind)

    async def find_by_id(self, kind: TokenKind, token_id: int) -> IssuedTokenData | None:
        model_cls = _MODELS[kind]
        stmt = select(model_cls).where(model_cls.token_id == token_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_data(model, kind) if model else None

    async def find_by_token(self, kind: TokenKind, token: str) -> IssuedTokenData | None:
        model_cls = _MODELS[kind]
        stmt = select(model_cls).where(model_cls.token == token)
        result = await self._session.execute(stmt)
        model = result.scalars().first()
        return self._to_data(model, kind) if model else None

    async def is_active(self, kind: TokenKind, token: str) -> bool:
        stored = await self.find_by_token(kind, token)
        if stored is None:
            return False
        return not stored.is_expired(datetime.now(tz=timezone.utc))

"""SQLAlchemy implementation of ConfirmationTokenRepository."""

import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from warden_accounts.domain import ConfirmationToken
from warden_accounts.infrastructure.persistence.sqlalchemy.models import (
    ConfirmationTokenModel,
)
from warden_accounts.repositories import ConfirmationTokenRepository

logger = logging.getLogger(__name__)


class ConfirmationTokenRepositorySQLAlchemy(ConfirmationTokenRepository):
    """
    SQLAlchemy implementation of ConfirmationTokenRepository.

    Token ids come from the autoincrement key; expiry is derived from
    ``ttl_minutes`` at insert time.
    """

    DEFAULT_TTL_MINUTES = 60

    def __init__(self, session: AsyncSession, ttl_minutes: int = DEFAULT_TTL_MINUTES):
        self._session = session
        self._ttl = timedelta(minutes=ttl_minutes)

    async def create(self, user_id: int, token: str) -> int | None:
        model = ConfirmationTokenModel(
            user_id=user_id,
            token=token,
            expires_at=datetime.now(tz=timezone.utc) + self._ttl,
        )
        self._session.add(model)
        await self._session.flush()
        return model.token_id

    async def find_by_id(self, token_id: int) -> ConfirmationToken | None:
        stmt = (
            select(ConfirmationTokenModel)
            .where(ConfirmationTokenModel.token_id == token_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return ConfirmationToken(
            token_id=model.token_id,
            user_id=model.user_id,
            token=model.token,
            expires_at=model.expires_at,
        )

    async def retire(self, token_id: int) -> bool:
        now = datetime.now(tz=timezone.utc)
        # retired_at is set once; a caller with an earlier clock cannot match again
        stmt = (
            update(ConfirmationTokenModel)
            .where(
                ConfirmationTokenModel.token_id == token_id,
                ConfirmationTokenModel.retired_at.is_(None),
                ConfirmationTokenModel.expires_at > now,
            )
            .values(retired_at=now, expires_at=now)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        retired = result.rowcount == 1
        if retired:
            logger.debug("Retired confirmation token %s", token_id)
        return retired

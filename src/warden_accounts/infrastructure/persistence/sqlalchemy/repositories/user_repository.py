"""SQLAlchemy implementation of UserRepository."""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from warden_accounts.domain import Identity, Role
from warden_accounts.infrastructure.persistence.sqlalchemy.models import UserModel
from warden_accounts.repositories import UserRepository

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: int) -> Identity | None:
        model = await self._find_model_by_id(user_id)
        return self._map_to_domain(model) if model else None

    async def find_by_email(self, email: str) -> Identity | None:
        stmt = select(UserModel).where(func.lower(UserModel.email) == email.lower())
        return await self._find_one(stmt)

    async def find_by_username(self, username: str) -> Identity | None:
        stmt = select(UserModel).where(UserModel.username == username)
        return await self._find_one(stmt)

    async def is_blocked(self, user_id: int) -> bool:
        model = await self._find_model_by_id(user_id)
        return model is not None and model.blocked

    async def is_verified(self, user_id: int) -> bool:
        model = await self._find_model_by_id(user_id)
        return model is not None and model.verified

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(func.count()).select_from(UserModel).where(
            func.lower(UserModel.email) == email.lower(),
        )
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    async def exists_by_username(self, username: str) -> bool:
        stmt = select(func.count()).select_from(UserModel).where(
            UserModel.username == username,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    async def create(self, username: str, email: str, password_hash: str) -> Identity:
        model = UserModel(
            username=username,
            email=email,
            password_hash=password_hash,
            blocked=False,
            verified=False,
            roles=[],
        )
        self._session.add(model)
        await self._session.flush()
        logger.info("Created user: %s (email: %s)", model.user_id, email)
        return self._map_to_domain(model)

    async def update_password_hash(self, user_id: int, password_hash: str) -> bool:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return False
        model.password_hash = password_hash
        await self._session.flush()
        logger.debug("Updated password hash for user: %s", user_id)
        return True

    async def update_status(self, user_id: int, *, blocked: bool, verified: bool) -> bool:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return False
        model.blocked = blocked
        model.verified = verified
        await self._session.flush()
        logger.debug(
            "Updated status for user %s: blocked=%s verified=%s",
            user_id,
            blocked,
            verified,
        )
        return True

    async def unlock(self, user_id: int) -> bool:
        return await self.update_status(user_id, blocked=False, verified=True)

    async def _find_one(self, stmt) -> Identity | None:
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def _find_model_by_id(self, user_id: int) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.user_id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> Identity:
        return Identity(
            user_id=model.user_id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            roles=frozenset(Role(role_id=r.role_id, name=r.name) for r in model.roles),
            blocked=model.blocked,
            verified=model.verified,
        )

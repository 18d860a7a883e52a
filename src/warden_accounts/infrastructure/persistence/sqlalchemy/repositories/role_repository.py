"""SQLAlchemy implementation of RoleRepository."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from warden_accounts.domain import Role
from warden_accounts.infrastructure.persistence.sqlalchemy.models import (
    RoleModel,
    UserModel,
)
from warden_accounts.repositories import RoleRepository

logger = logging.getLogger(__name__)


class RoleRepositorySQLAlchemy(RoleRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, role_id: int) -> Role | None:
        model = await self._session.get(RoleModel, role_id)
        return Role(role_id=model.role_id, name=model.name) if model else None

    async def assign(self, user_id: int, role_id: int) -> None:
        user = await self._session.get(UserModel, user_id)
        if user is None:
            msg = f"User {user_id} does not exist"
            raise LookupError(msg)
        role = await self._session.get(RoleModel, role_id)
        if role is None:
            msg = f"Role {role_id} does not exist"
            raise LookupError(msg)

        if role not in user.roles:
            user.roles.append(role)
            await self._session.flush()
            logger.debug("Assigned role %s to user %s", role.name, user_id)

    async def find_for_user(self, user_id: int) -> frozenset[Role]:
        stmt = select(UserModel).where(UserModel.user_id == user_id)
        result = await self._session.execute(stmt)
        user = result.scalar_one_or_none()
        if user is None:
            return frozenset()
        return frozenset(Role(role_id=r.role_id, name=r.name) for r in user.roles)

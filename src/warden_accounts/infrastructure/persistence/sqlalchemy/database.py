"""Engine, sessions and schema management."""

import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator, AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

# Import models to register with AccountsBase.metadata
import warden_accounts.infrastructure.persistence.sqlalchemy.models  # noqa: F401
import warden_auth.persistence.sqlalchemy.models  # noqa: F401
from warden_accounts.infrastructure.persistence.sqlalchemy.base import AccountsBase
from warden_accounts.infrastructure.persistence.sqlalchemy.models import RoleModel
from warden_config.settings import get_settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_settings().database_url,
        echo=False,
        pool_pre_ping=True,
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


@asynccontextmanager
async def unit_of_work(
    session_maker: async_sessionmaker[AsyncSession] | None = None,
) -> AsyncIterator[AsyncSession]:
    """
    Session scope for one lifecycle operation.

    Commits when the block exits normally and rolls back on any exception.
    """
    maker = session_maker or get_session_maker()
    async with maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Yields
    ------
    AsyncSession committed after the request handler returns
    """
    async with unit_of_work() as session:
        yield session


async def seed_roles(session: AsyncSession, roles: dict[int, str]) -> None:
    """Insert missing roles; existing rows are left untouched."""
    for role_id, name in roles.items():
        if await session.get(RoleModel, role_id) is None:
            session.add(RoleModel(role_id=role_id, name=name))
            logger.info("Seeded role %s (%s)", role_id, name)
    await session.flush()


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables (idempotent) and the default role.

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    engine = engine or get_engine()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(AccountsBase.metadata.create_all)

    settings = get_settings()
    maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with unit_of_work(maker) as session:
        await seed_roles(session, {settings.default_role_id: settings.default_role_name})

    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    engine = engine or get_engine()
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(AccountsBase.metadata.drop_all)

    logger.info("Database tables dropped successfully")

"""Integration tests for the confirmation and issued token repositories."""

import asyncio
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock, patch

import pytest
import pytest_asyncio

from warden_accounts.infrastructure.persistence.sqlalchemy import (
    ConfirmationTokenRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from warden_auth import TokenKind
from warden_auth.persistence.sqlalchemy import IssuedTokenRepositorySQLAlchemy

CLOCK = (
    "warden_accounts.infrastructure.persistence.sqlalchemy.repositories"
    ".confirmation_token_repository.datetime"
)


def _clock(*instants: datetime) -> Mock:
    clock = Mock()
    clock.now.side_effect = list(instants)
    return clock


@pytest_asyncio.fixture
async def user_id(db_session):
    created = await UserRepositorySQLAlchemy(db_session).create(
        "alice",
        "alice@example.com",
        "$2b$04$hash",
    )
    return created.user_id


@pytest.fixture
def confirmation_repo(db_session):
    return ConfirmationTokenRepositorySQLAlchemy(db_session, ttl_minutes=60)


@pytest.fixture
def issued_repo(db_session):
    return IssuedTokenRepositorySQLAlchemy(db_session)


@pytest.mark.integration
class TestConfirmationTokenRepositorySQLAlchemy:
    """Integration tests for ConfirmationTokenRepositorySQLAlchemy."""

    @pytest.mark.asyncio
    async def test_create_and_find(self, confirmation_repo, user_id):
        """Created tokens expire ttl minutes from now."""
        before = datetime.now(tz=timezone.utc)
        token_id = await confirmation_repo.create(user_id, "A" * 100)

        token = await confirmation_repo.find_by_id(token_id)

        assert token is not None
        assert token.user_id == user_id
        assert token.token == "A" * 100
        assert before + timedelta(minutes=59) < token.expires_at
        assert token.expires_at <= datetime.now(tz=timezone.utc) + timedelta(minutes=60)

    @pytest.mark.asyncio
    async def test_find_unknown(self, confirmation_repo):
        assert await confirmation_repo.find_by_id(12345) is None

    @pytest.mark.asyncio
    async def test_retire_exactly_once(self, confirmation_repo, user_id):
        """Only the first retirement of a token succeeds."""
        token_id = await confirmation_repo.create(user_id, "B" * 100)

        assert await confirmation_repo.retire(token_id) is True
        assert await confirmation_repo.retire(token_id) is False

        token = await confirmation_repo.find_by_id(token_id)
        assert token.is_expired(datetime.now(tz=timezone.utc))

    @pytest.mark.asyncio
    async def test_retire_from_second_session_with_earlier_clock(
        self, confirmation_repo, db_session, session_maker, user_id
    ):
        """A later caller whose clock lags the first retirement still fails."""
        token_id = await confirmation_repo.create(user_id, "E" * 100)
        await db_session.commit()
        base = datetime.now(tz=timezone.utc)

        results = []
        with patch(CLOCK, _clock(base + timedelta(milliseconds=5), base)):
            for _ in range(2):
                async with session_maker() as session:
                    repo = ConfirmationTokenRepositorySQLAlchemy(session)
                    results.append(await repo.retire(token_id))
                    await session.commit()

        assert results == [True, False]

    @pytest.mark.asyncio
    async def test_concurrent_retire_blocked_on_row_lock(
        self, confirmation_repo, db_session, session_maker, user_id
    ):
        """The waiting retirement re-checks the committed row and fails."""
        token_id = await confirmation_repo.create(user_id, "F" * 100)
        await db_session.commit()
        base = datetime.now(tz=timezone.utc)

        async with session_maker() as first, session_maker() as second:
            with patch(CLOCK, _clock(base + timedelta(milliseconds=5), base)):
                assert await ConfirmationTokenRepositorySQLAlchemy(first).retire(token_id)
                waiting = asyncio.create_task(
                    ConfirmationTokenRepositorySQLAlchemy(second).retire(token_id),
                )
                await asyncio.sleep(0.2)
                assert not waiting.done()

                await first.commit()
                retired_again = await waiting
            await second.commit()

        assert retired_again is False

    @pytest.mark.asyncio
    async def test_retire_unknown(self, confirmation_repo):
        assert await confirmation_repo.retire(12345) is False

    @pytest.mark.asyncio
    async def test_ids_are_distinct(self, confirmation_repo, user_id):
        first = await confirmation_repo.create(user_id, "C" * 100)
        second = await confirmation_repo.create(user_id, "D" * 100)

        assert first != second


@pytest.mark.integration
class TestIssuedTokenRepositorySQLAlchemy:
    """Integration tests for IssuedTokenRepositorySQLAlchemy."""

    @pytest.mark.asyncio
    async def test_save_and_find(self, issued_repo):
        expires_at = datetime.now(tz=timezone.utc) + timedelta(hours=1)

        stored = await issued_repo.save(TokenKind.ACCESS, 7, "jwt-access", expires_at)

        assert stored.token_id > 0
        assert stored.kind is TokenKind.ACCESS
        assert await issued_repo.find_by_id(TokenKind.ACCESS, stored.token_id) == stored
        assert await issued_repo.find_by_token(TokenKind.ACCESS, "jwt-access") == stored

    @pytest.mark.asyncio
    async def test_kinds_are_separate(self, issued_repo):
        """An access token is not found in the refresh table."""
        expires_at = datetime.now(tz=timezone.utc) + timedelta(hours=1)
        await issued_repo.save(TokenKind.ACCESS, 7, "jwt-access", expires_at)

        assert await issued_repo.is_active(TokenKind.ACCESS, "jwt-access")
        assert not await issued_repo.is_active(TokenKind.REFRESH, "jwt-access")

    @pytest.mark.asyncio
    async def test_expired_token_not_active(self, issued_repo):
        expires_at = datetime.now(tz=timezone.utc) - timedelta(seconds=1)
        await issued_repo.save(TokenKind.REFRESH, 7, "jwt-refresh", expires_at)

        assert not await issued_repo.is_active(TokenKind.REFRESH, "jwt-refresh")

    @pytest.mark.asyncio
    async def test_unknown_token_not_active(self, issued_repo):
        assert not await issued_repo.is_active(TokenKind.ACCESS, "never-issued")

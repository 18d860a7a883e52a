"""End-to-end account lifecycle against PostgreSQL."""

import re
from unittest.mock import Mock

import pytest

from warden_accounts.application import (
    AccountLifecycleService,
    AccountProcessFactory,
    AccountStores,
    AuthenticationService,
    MailComposer,
)
from warden_accounts.domain import (
    AccountResponseCode,
    ChangePasswordRequest,
    ConfirmationRequest,
    RegistrationRequest,
    ResetPasswordRequest,
    UnlockRequest,
)
from warden_accounts.infrastructure.persistence.sqlalchemy import (
    ConfirmationTokenRepositorySQLAlchemy,
    RoleRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from warden_auth import (
    AccountLockedError,
    ConfirmationTokenGenerator,
    InvalidCredentialsError,
    JWTService,
    PasswordGenerator,
    PasswordHashingService,
)
from warden_auth.persistence.sqlalchemy import IssuedTokenRepositorySQLAlchemy
from tests.shared.fixtures.database import DEFAULT_ROLE_ID

Code = AccountResponseCode
CONFIRM_URL = "http://localhost/confirm/"
LINK_PATTERN = re.compile(re.escape(CONFIRM_URL) + r"(\d+)/([A-Za-z0-9]+)")


@pytest.fixture
def password_service():
    return PasswordHashingService(rounds=4)


@pytest.fixture
def notifier():
    return Mock()


@pytest.fixture
def lifecycle(db_session, password_service, notifier):
    factory = AccountProcessFactory(
        password_service=password_service,
        token_generator=ConfirmationTokenGenerator(),
        password_generator=PasswordGenerator(),
        mail_composer=MailComposer(CONFIRM_URL),
        default_role_id=DEFAULT_ROLE_ID,
    )
    stores = AccountStores(
        users=UserRepositorySQLAlchemy(db_session),
        roles=RoleRepositorySQLAlchemy(db_session),
        confirmation_tokens=ConfirmationTokenRepositorySQLAlchemy(db_session),
    )
    return AccountLifecycleService(factory, stores, notifier)


@pytest.fixture
def auth(db_session, password_service):
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(db_session),
        token_repository=IssuedTokenRepositorySQLAlchemy(db_session),
        password_service=password_service,
        jwt_service=JWTService(secret_key="integration-secret"),
    )


def _last_link(notifier: Mock) -> ConfirmationRequest:
    text = notifier.send_email.call_args.args[2]
    match = LINK_PATTERN.search(text)
    assert match is not None
    return ConfirmationRequest(token_id=int(match.group(1)), token=match.group(2))


async def _register_and_confirm(lifecycle, notifier) -> None:
    registered = await lifecycle.register(
        RegistrationRequest(username="alice", password="pw1", email="alice@x.com"),
    )
    assert registered.code is Code.VERIFICATION_MAIL_FROM_REGISTRATION

    confirmed = await lifecycle.confirm(_last_link(notifier))
    assert confirmed.code is Code.ACCOUNT_CONFIRMED


@pytest.mark.integration
class TestAccountLifecycleFlow:
    """Full lifecycle through the facade with SQLAlchemy stores."""

    @pytest.mark.asyncio
    async def test_register_confirm_login(self, lifecycle, auth, notifier):
        """A confirmed registration can log in and carries the default role."""
        registered = await lifecycle.register(
            RegistrationRequest(username="alice", password="pw1", email="alice@x.com"),
        )
        assert registered.code is Code.VERIFICATION_MAIL_FROM_REGISTRATION

        with pytest.raises(AccountLockedError):
            await auth.login("alice", "pw1")

        link = _last_link(notifier)
        assert (await lifecycle.confirm(link)).code is Code.ACCOUNT_CONFIRMED
        assert (await lifecycle.confirm(link)).code is Code.TOKEN_EXPIRED

        pair = await auth.login("alice@x.com", "pw1")
        assert pair.identity.verified
        assert [claim.name for claim in pair.identity.role_claims] == ["ROLE_USER"]
        assert await auth.is_token_active(pair.access_token)
        assert await auth.refresh_access(pair.refresh_token)

    @pytest.mark.asyncio
    async def test_duplicate_registration(self, lifecycle, notifier):
        await _register_and_confirm(lifecycle, notifier)

        by_email = await lifecycle.register(
            RegistrationRequest(username="bob", password="pw2", email="ALICE@x.com"),
        )
        by_username = await lifecycle.register(
            RegistrationRequest(username="alice", password="pw2", email="bob@x.com"),
        )

        assert by_email.code is Code.EMAIL_IS_NOT_UNIQUE
        assert by_username.code is Code.LOGIN_IS_NOT_UNIQUE

    @pytest.mark.asyncio
    async def test_change_password(self, lifecycle, auth, notifier):
        await _register_and_confirm(lifecycle, notifier)
        user_id = (await auth.login("alice", "pw1")).identity.user_id

        changed = await lifecycle.change_password(
            ChangePasswordRequest(user_id, "alice@x.com", "pw1", "pw-new"),
        )

        assert changed.code is Code.PASSWORD_CHANGED
        with pytest.raises(InvalidCredentialsError):
            await auth.login("alice", "pw1")
        assert (await auth.login("alice", "pw-new")).identity.user_id == user_id

    @pytest.mark.asyncio
    async def test_reset_password(self, lifecycle, auth, notifier):
        await _register_and_confirm(lifecycle, notifier)

        reset = await lifecycle.reset_password(ResetPasswordRequest(email="alice@x.com"))

        assert reset.code is Code.MAIL_NEW_PASSWD_SENT
        text = notifier.send_email.call_args.args[2]
        plaintext = text.split("your new password is:\n")[1].split("\n")[0]
        assert (await auth.login("alice", plaintext)).identity.username == "alice"

    @pytest.mark.asyncio
    async def test_unlock_requires_reconfirmation(self, lifecycle, auth, notifier, db_session):
        await _register_and_confirm(lifecycle, notifier)
        users = UserRepositorySQLAlchemy(db_session)
        identity = await users.find_by_username("alice")
        await users.update_status(identity.user_id, blocked=True, verified=True)

        unlocked = await lifecycle.unlock(UnlockRequest(user_id=identity.user_id))
        assert unlocked.code is Code.VERIFICATION_MAIL_FROM_UNLOCK
        with pytest.raises(AccountLockedError):
            await auth.login("alice", "pw1")

        assert (await lifecycle.confirm(_last_link(notifier))).code is Code.ACCOUNT_CONFIRMED
        assert (await auth.login("alice", "pw1")).identity.can_log_in

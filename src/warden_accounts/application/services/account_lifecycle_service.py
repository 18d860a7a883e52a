"""Account lifecycle facade."""

import logging

from warden_accounts.application.process_factory import (
    AccountProcessFactory,
    AccountStores,
)
from warden_accounts.application.processes import (
    ChangePasswordProcess,
    ConfirmationProcess,
    Notifier,
    RegistrationProcess,
    ResetPasswordProcess,
    UnlockProcess,
)
from warden_accounts.domain import (
    AccountAction,
    AccountResponse,
    AccountResponseCode,
    ChangePasswordRequest,
    ConfirmationRequest,
    Identity,
    RegistrationRequest,
    ResetPasswordRequest,
    UnlockRequest,
)

logger = logging.getLogger(__name__)


class AccountLifecycleService:
    """
    Application service for the five account lifecycle operations.

    Every operation runs the same two phases: the process ``check`` decides,
    and only a positive check is followed by the mutation and the mail.
    A rejected check is returned unchanged. Notifier failures never raise
    here; they are folded into the returned response.

    Bound to the stores of one unit of work; the caller commits.
    """

    def __init__(
        self,
        process_factory: AccountProcessFactory,
        stores: AccountStores,
        notifier: Notifier,
    ):
        self._factory = process_factory
        self._stores = stores
        self._notifier = notifier

    def _process(self, action: AccountAction):
        return self._factory.create(action, self._stores, self._notifier)

    async def register(self, request: RegistrationRequest) -> AccountResponse:
        process: RegistrationProcess = self._process(AccountAction.REGISTRATION)
        checked = await process.check(request)
        if not checked.success:
            logger.info("Registration rejected for %s: %s", request.email, checked.code.name)
            return checked

        identity = await process.save(request)
        token = await process.issue_token(identity)
        if token is None:
            return process.token_not_created()
        return process.send_verification(identity, token)

    async def confirm(self, request: ConfirmationRequest) -> AccountResponse:
        process: ConfirmationProcess = self._process(AccountAction.CONFIRMATION)
        checked = await process.check(request)
        if not checked.success:
            logger.info("Confirmation rejected for token %s: %s", request.token_id, checked.code.name)
            return checked

        return await process.update(request)

    async def unlock(self, request: UnlockRequest) -> AccountResponse:
        process: UnlockProcess = self._process(AccountAction.UNLOCK)
        checked = await process.check(request)
        if not checked.success:
            logger.info("Unlock rejected for user %s: %s", request.user_id, checked.code.name)
            return checked

        identity = await process.save(request)
        token = await process.issue_token(identity)
        if identity is None or token is None:
            return process.token_not_created()
        return process.send_verification(identity, token)

    async def reset_password(self, request: ResetPasswordRequest) -> AccountResponse:
        process: ResetPasswordProcess = self._process(AccountAction.RESET_PASSWORD)
        checked = await process.check(request)
        if not checked.success:
            logger.info("Password reset rejected for %s: %s", request.email, checked.code.name)
            return checked

        generated = await process.save(request)
        if generated is None:
            return AccountResponse.fail(AccountResponseCode.ACCOUNT_NOT_EXIST_RESET_PASSWD)
        return process.send_new_password(generated)

    async def change_password(self, request: ChangePasswordRequest) -> AccountResponse:
        process: ChangePasswordProcess = self._process(AccountAction.CHANGE_PASSWORD)
        checked = await process.check(request)
        if not checked.success:
            logger.info("Password change rejected for %s: %s", request.email, checked.code.name)
            return checked

        updated = await process.update(request)
        if not updated.success:
            return updated

        identity = await self._stores.users.find_by_email(request.email)
        if identity is None:
            return AccountResponse.fail(AccountResponseCode.PASSWORD_CHANGED_BUT_MAIL_NOT_SEND)

        notice = process.send_change_notice(identity)
        if not notice.success:
            logger.warning("Password changed for user %s but notice was not sent", identity.user_id)
            return notice
        return updated

    async def get_roles(self, username: str, email: str) -> Identity | None:
        """Return the identity with its roles if both username and email match."""
        identity = await self._stores.users.find_by_username(username)
        if identity is None or identity.email.lower() != email.lower():
            return None
        return identity

"""Unlock of a blocked or unverified account."""

import logging

from warden_accounts.application.confirmation_token_issuer import (
    ConfirmationTokenIssuer,
)
from warden_accounts.application.mail_composer import MailComposer
from warden_accounts.application.processes.base import (
    AccountProcess,
    ConfirmationIssuing,
    Notifier,
)
from warden_accounts.domain import (
    AccountAction,
    AccountResponse,
    AccountResponseCode,
    Identity,
    UnlockRequest,
)
from warden_accounts.repositories import UserRepository

logger = logging.getLogger(__name__)


class UnlockProcess(ConfirmationIssuing, AccountProcess):
    """Resets an account to unverified so the owner can re-confirm it."""

    kind = AccountAction.UNLOCK

    def __init__(
        self,
        user_repository: UserRepository,
        issuer: ConfirmationTokenIssuer,
        notifier: Notifier,
        mail_composer: MailComposer,
    ):
        self._user_repo = user_repository
        self._issuer = issuer
        self._notifier = notifier
        self._mail_composer = mail_composer

    async def check(self, request: UnlockRequest) -> AccountResponse:
        if not self.accepts(request):
            return AccountResponse.fail(AccountResponseCode.BAD_UNLOCK_REQUEST_TYPE)

        identity = await self._user_repo.find_by_id(request.user_id)
        if identity is None:
            return AccountResponse.fail(AccountResponseCode.ACCOUNT_NOT_EXIST_UNLOCK_ACCOUNT)
        if identity.verified and not identity.blocked:
            return AccountResponse.fail(AccountResponseCode.ACCOUNT_VERIFIED_AND_NOT_BLOCKED)
        return AccountResponse.ok(AccountResponseCode.ACCOUNT_CAN_BE_UNLOCKED)

    async def save(self, request: UnlockRequest) -> Identity | None:
        """Clear both status flags and return the refreshed identity."""
        self._require(request)

        await self._user_repo.update_status(request.user_id, blocked=False, verified=False)
        logger.info("Account %s reset for unlock", request.user_id)
        return await self._user_repo.find_by_id(request.user_id)

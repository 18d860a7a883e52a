"""Confirmation of an email address with a mailed token."""

import logging
import secrets
from datetime import datetime, timezone

from warden_accounts.application.confirmation_token_issuer import (
    ConfirmationTokenIssuer,
)
from warden_accounts.application.processes.base import AccountProcess
from warden_accounts.domain import (
    AccountAction,
    AccountResponse,
    AccountResponseCode,
    ConfirmationRequest,
)
from warden_accounts.repositories import UserRepository

logger = logging.getLogger(__name__)


class ConfirmationProcess(AccountProcess):
    """Consumes a confirmation token and unlocks its owner."""

    kind = AccountAction.CONFIRMATION

    def __init__(
        self,
        user_repository: UserRepository,
        issuer: ConfirmationTokenIssuer,
    ):
        self._user_repo = user_repository
        self._issuer = issuer

    async def check(self, request: ConfirmationRequest) -> AccountResponse:
        if not self.accepts(request):
            return AccountResponse.fail(AccountResponseCode.BAD_CONFIRMATION_REQUEST_TYPE)

        token = await self._issuer.find(request.token_id)
        if token is None:
            return AccountResponse.fail(AccountResponseCode.TOKEN_NOT_FOUND)
        if not secrets.compare_digest(token.token.encode(), request.token.encode()):
            return AccountResponse.fail(AccountResponseCode.INVALID_TOKEN_VALUE)
        if token.is_expired(datetime.now(tz=timezone.utc)):
            return AccountResponse.fail(AccountResponseCode.TOKEN_EXPIRED)
        return AccountResponse.ok(AccountResponseCode.TOKEN_IS_VALID)

    async def update(self, request: ConfirmationRequest) -> AccountResponse:
        """
        Retire the token and mark its owner verified and unblocked.

        The token is re-checked first. Retirement is conditional, so of two
        concurrent confirmations only one succeeds; the other gets
        TOKEN_EXPIRED.
        """
        checked = await self.check(request)
        if not checked.success:
            return checked

        token = await self._issuer.find(request.token_id)
        if token is None or not await self._issuer.retire(token.token_id):
            return AccountResponse.fail(AccountResponseCode.TOKEN_EXPIRED)

        await self._user_repo.unlock(token.user_id)
        logger.info("Account %s confirmed with token %s", token.user_id, token.token_id)
        return AccountResponse.ok(AccountResponseCode.ACCOUNT_CONFIRMED)

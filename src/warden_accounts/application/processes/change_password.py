"""Change of a known password."""

import logging

from warden_accounts.application.processes.base import PasswordProcess
from warden_accounts.domain import (
    AccountAction,
    AccountResponse,
    AccountResponseCode,
    ChangePasswordRequest,
)

logger = logging.getLogger(__name__)


class ChangePasswordProcess(PasswordProcess):
    """Replaces the password after verifying the current one."""

    kind = AccountAction.CHANGE_PASSWORD

    async def check(self, request: ChangePasswordRequest) -> AccountResponse:
        if not self.accepts(request):
            return AccountResponse.fail(AccountResponseCode.BAD_CHANGE_PASSWD_REQUEST_TYPE)

        identity = await self._user_repo.find_by_email(request.email)
        if identity is None or identity.user_id != request.user_id:
            return AccountResponse.fail(AccountResponseCode.EMAIL_NOT_EXIST_CHANGE_PASSWD)
        if await self._user_repo.is_blocked(identity.user_id):
            return AccountResponse.fail(AccountResponseCode.ACCOUNT_IS_BLOCKED_CHANGE_PASSWD)
        if not self._password_service.verify(request.actual_password, identity.password_hash):
            return AccountResponse.fail(AccountResponseCode.BAD_ACTUAL_PASSWORD_CHANGE_PASSWD)
        return AccountResponse.ok(AccountResponseCode.PASSWORD_CAN_BE_CHANGED)

    async def update(self, request: ChangePasswordRequest) -> AccountResponse:
        if not self.accepts(request):
            return AccountResponse.fail(AccountResponseCode.PASSWORD_NOT_CHANGED)

        identity = await self._user_repo.find_by_email(request.email)
        if identity is None:
            return AccountResponse.fail(AccountResponseCode.PASSWORD_NOT_CHANGED)

        changed = await self._user_repo.update_password_hash(
            identity.user_id,
            self._password_service.hash(request.new_password),
        )
        if not changed:
            return AccountResponse.fail(AccountResponseCode.PASSWORD_NOT_CHANGED)

        logger.info("Password changed for user %s", identity.user_id)
        return AccountResponse.ok(AccountResponseCode.PASSWORD_CHANGED)

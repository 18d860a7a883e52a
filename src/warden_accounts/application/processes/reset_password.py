"""Replacement of a forgotten password with a generated one."""

import logging

from warden_accounts.application.mail_composer import MailComposer
from warden_accounts.application.processes.base import Notifier, PasswordProcess
from warden_accounts.domain import (
    AccountAction,
    AccountResponse,
    AccountResponseCode,
    GeneratedPassword,
    ResetPasswordRequest,
)
from warden_accounts.repositories import UserRepository
from warden_auth.services import PasswordGenerator, PasswordHashingService

logger = logging.getLogger(__name__)


class ResetPasswordProcess(PasswordProcess):
    """Generates a strong password for a verified, unblocked account."""

    kind = AccountAction.RESET_PASSWORD

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        password_generator: PasswordGenerator,
        notifier: Notifier,
        mail_composer: MailComposer,
    ):
        super().__init__(user_repository, password_service, notifier, mail_composer)
        self._password_generator = password_generator

    async def check(self, request: ResetPasswordRequest) -> AccountResponse:
        if not self.accepts(request):
            return AccountResponse.fail(AccountResponseCode.BAD_RESET_PASSWD_REQUEST_TYPE)

        identity = await self._user_repo.find_by_email(request.email)
        if identity is None:
            return AccountResponse.fail(AccountResponseCode.ACCOUNT_NOT_EXIST_RESET_PASSWD)
        if await self._user_repo.is_blocked(identity.user_id):
            return AccountResponse.fail(AccountResponseCode.ACCOUNT_IS_BLOCKED_RESET_PASSWD)
        if not await self._user_repo.is_verified(identity.user_id):
            return AccountResponse.fail(AccountResponseCode.ACCOUNT_IS_NOT_VERIFIED)
        return AccountResponse.ok(AccountResponseCode.PASSWORD_CAN_BE_GENERATED)

    async def save(self, request: ResetPasswordRequest) -> GeneratedPassword | None:
        """
        Generate, hash and persist a new password.

        Returns
        -------
        The identity with the plaintext attached for mailing, or None if no
        account matches the email
        """
        self._require(request)

        identity = await self._user_repo.find_by_email(request.email)
        if identity is None:
            return None

        plaintext = self._password_generator.generate()
        await self._user_repo.update_password_hash(
            identity.user_id,
            self._password_service.hash(plaintext),
        )
        logger.info("Generated new password for user %s", identity.user_id)

        refreshed = await self._user_repo.find_by_id(identity.user_id)
        return GeneratedPassword(identity=refreshed or identity, plaintext=plaintext)

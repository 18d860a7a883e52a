"""Registration of a new identity."""

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
    RegistrationRequest,
)
from warden_accounts.repositories import RoleRepository, UserRepository
from warden_auth.services import PasswordHashingService

logger = logging.getLogger(__name__)


class RegistrationProcess(ConfirmationIssuing, AccountProcess):
    """Creates an unverified identity with the default role attached."""

    kind = AccountAction.REGISTRATION

    def __init__(  # noqa: PLR0913
        self,
        user_repository: UserRepository,
        role_repository: RoleRepository,
        issuer: ConfirmationTokenIssuer,
        password_service: PasswordHashingService,
        notifier: Notifier,
        mail_composer: MailComposer,
        default_role_id: int,
    ):
        self._user_repo = user_repository
        self._role_repo = role_repository
        self._issuer = issuer
        self._password_service = password_service
        self._notifier = notifier
        self._mail_composer = mail_composer
        self._default_role_id = default_role_id

    async def check(self, request: RegistrationRequest) -> AccountResponse:
        if not self.accepts(request):
            return AccountResponse.fail(AccountResponseCode.BAD_REGISTRATION_REQUEST_TYPE)
        if await self._user_repo.exists_by_email(request.email):
            return AccountResponse.fail(AccountResponseCode.EMAIL_IS_NOT_UNIQUE)
        if await self._user_repo.exists_by_username(request.username):
            return AccountResponse.fail(AccountResponseCode.LOGIN_IS_NOT_UNIQUE)
        return AccountResponse.ok(AccountResponseCode.UNIQUE_LOGIN_AND_EMAIL)

    async def save(self, request: RegistrationRequest) -> Identity:
        """
        Persist the identity and attach the default role.

        Returns
        -------
        The stored identity, re-read with its roles

        Raises
        ------
        RequestTypeError
            If ``request`` is not a registration request
        WeakPasswordError
            If the password cannot be hashed
        """
        self._require(request)

        password_hash = self._password_service.hash(request.password)
        identity = await self._user_repo.create(
            username=request.username,
            email=request.email,
            password_hash=password_hash,
        )
        await self._role_repo.assign(identity.user_id, self._default_role_id)

        logger.info("Registered user %s (%s)", identity.user_id, identity.username)
        stored = await self._user_repo.find_by_id(identity.user_id)
        return stored if stored is not None else identity

"""Account process contract and the two shared capabilities.

A process answers ``check`` for exactly one lifecycle action and, once the
check is positive, performs the mutation through ``save`` or ``update``.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Protocol

from warden_accounts.application.confirmation_token_issuer import (
    ConfirmationTokenIssuer,
)
from warden_accounts.application.mail_composer import MailComposer, MailMessage
from warden_accounts.domain import (
    AccountAction,
    AccountResponse,
    AccountResponseCode,
    ConfirmationToken,
    GeneratedPassword,
    Identity,
)
from warden_accounts.exceptions import RequestTypeError, UnsupportedOperationError
from warden_accounts.repositories import UserRepository
from warden_auth.services import PasswordHashingService

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def send_email(self, to: str, subject: str, text: str) -> None: ...


def deliver(notifier: Notifier, message: MailMessage) -> bool:
    """Send ``message``; any notifier failure is logged and reported as False."""
    try:
        notifier.send_email(message.to, message.subject, message.text)
    except Exception as e:
        logger.error("Failed to send '%s' mail to %s: %s", message.subject, message.to, e)
        return False
    return True


class AccountProcess(ABC):
    """Base class for the lifecycle processes."""

    kind: ClassVar[AccountAction]

    def accepts(self, request: Any) -> bool:
        return getattr(request, "action", None) is self.kind

    def _require(self, request: Any) -> None:
        if not self.accepts(request):
            raise RequestTypeError(type(self).__name__, request)

    @abstractmethod
    async def check(self, request: Any) -> AccountResponse:
        """Decide whether the request may proceed."""

    async def update(self, request: Any) -> AccountResponse:
        raise UnsupportedOperationError(type(self).__name__, "update")

    async def save(self, request: Any) -> Any:
        raise UnsupportedOperationError(type(self).__name__, "save")


# (sent, not sent, token not created) per confirmation-issuing action
_VERIFICATION_CODES: dict[
    AccountAction,
    tuple[AccountResponseCode, AccountResponseCode, AccountResponseCode],
] = {
    AccountAction.REGISTRATION: (
        AccountResponseCode.VERIFICATION_MAIL_FROM_REGISTRATION,
        AccountResponseCode.VERIFICATION_MAIL_NOT_SENT_FROM_REGISTRATION,
        AccountResponseCode.CONFIRMATION_TOKEN_NOT_CREATED_FROM_REGISTRATION,
    ),
    AccountAction.UNLOCK: (
        AccountResponseCode.VERIFICATION_MAIL_FROM_UNLOCK,
        AccountResponseCode.VERIFICATION_MAIL_NOT_SENT_FROM_UNLOCK,
        AccountResponseCode.CONFIRMATION_TOKEN_NOT_CREATED_FROM_UNLOCK,
    ),
}


class ConfirmationIssuing:
    """Capability of processes that finish by mailing a confirmation link.

    Subclasses must set ``kind`` to an action listed in
    ``_VERIFICATION_CODES``; the lookup happens at class creation.
    """

    kind: ClassVar[AccountAction]

    _issuer: ConfirmationTokenIssuer
    _notifier: Notifier
    _mail_composer: MailComposer

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        if cls.kind not in _VERIFICATION_CODES:
            msg = f"No verification codes for {cls.kind!r}"
            raise KeyError(msg)

    async def issue_token(self, identity: Identity | None) -> ConfirmationToken | None:
        return await self._issuer.issue(identity)

    def send_verification(
        self,
        identity: Identity,
        token: ConfirmationToken,
    ) -> AccountResponse:
        sent, not_sent, _ = _VERIFICATION_CODES[self.kind]
        if deliver(self._notifier, self._mail_composer.verification(identity, token)):
            return AccountResponse.ok(sent)
        return AccountResponse.fail(not_sent)

    def token_not_created(self) -> AccountResponse:
        return AccountResponse.fail(_VERIFICATION_CODES[self.kind][2])


class PasswordProcess(AccountProcess):
    """Base for processes that mutate a password and mail the user about it."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        notifier: Notifier,
        mail_composer: MailComposer,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._notifier = notifier
        self._mail_composer = mail_composer

    def send_new_password(self, generated: GeneratedPassword) -> AccountResponse:
        if deliver(self._notifier, self._mail_composer.new_password(generated)):
            return AccountResponse.ok(AccountResponseCode.MAIL_NEW_PASSWD_SENT)
        return AccountResponse.fail(AccountResponseCode.MAIL_NEW_PASSWD_NOT_SENT)

    def send_change_notice(self, identity: Identity) -> AccountResponse:
        if deliver(self._notifier, self._mail_composer.password_changed(identity)):
            return AccountResponse.ok(AccountResponseCode.MAIL_PASSWD_CHANGED_SENT)
        return AccountResponse.fail(AccountResponseCode.PASSWORD_CHANGED_BUT_MAIL_NOT_SEND)

"""Application layer: processes, dispatcher and services."""

from warden_accounts.application.confirmation_token_issuer import (
    ConfirmationTokenIssuer,
)
from warden_accounts.application.mail_composer import MailComposer, MailMessage
from warden_accounts.application.process_factory import (
    AccountProcessFactory,
    AccountStores,
)
from warden_accounts.application.services import (
    AccountLifecycleService,
    AuthenticationService,
    TokenPair,
)

__all__ = [
    "AccountLifecycleService",
    "AccountProcessFactory",
    "AccountStores",
    "AuthenticationService",
    "ConfirmationTokenIssuer",
    "MailComposer",
    "MailMessage",
    "TokenPair",
]

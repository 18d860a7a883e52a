"""Warden Accounts - account lifecycle on top of warden_auth.

Architecture:
    warden_accounts/
    ├── domain/             # Identity, roles, tokens, requests, responses
    ├── repositories/       # Abstract store interfaces
    ├── application/        # Processes, dispatcher, lifecycle and auth services
    ├── infrastructure/     # SQLAlchemy persistence, SMTP notifier
    └── presentation/       # FastAPI dependencies

Usage:
    from warden_accounts import AccountLifecycleService, RegistrationRequest
"""

from warden_accounts.application import (
    AccountLifecycleService,
    AccountProcessFactory,
    AccountStores,
    AuthenticationService,
    ConfirmationTokenIssuer,
    MailComposer,
    TokenPair,
)
from warden_accounts.domain import (
    AccountAction,
    AccountResponse,
    AccountResponseCode,
    ChangePasswordRequest,
    ConfirmationRequest,
    ConfirmationToken,
    GeneratedPassword,
    Identity,
    RegistrationRequest,
    ResetPasswordRequest,
    Role,
    UnlockRequest,
)
from warden_accounts.exceptions import (
    AccountError,
    InvalidEmailMessageError,
    RequestTypeError,
    UnsupportedOperationError,
)

__all__ = [
    # Services
    "AccountLifecycleService",
    "AccountProcessFactory",
    "AccountStores",
    "AuthenticationService",
    "ConfirmationTokenIssuer",
    "MailComposer",
    "TokenPair",
    # Domain
    "AccountAction",
    "AccountResponse",
    "AccountResponseCode",
    "ChangePasswordRequest",
    "ConfirmationRequest",
    "ConfirmationToken",
    "GeneratedPassword",
    "Identity",
    "RegistrationRequest",
    "ResetPasswordRequest",
    "Role",
    "UnlockRequest",
    # Exceptions
    "AccountError",
    "InvalidEmailMessageError",
    "RequestTypeError",
    "UnsupportedOperationError",
]

"""Account domain: identities, roles, confirmation tokens, requests and responses."""

from warden_accounts.domain.actions import AccountAction, AppCode
from warden_accounts.domain.confirmation_token import ConfirmationToken
from warden_accounts.domain.identity import GeneratedPassword, Identity, Role
from warden_accounts.domain.requests import (
    AccountRequest,
    ChangePasswordRequest,
    ConfirmationRequest,
    RegistrationRequest,
    ResetPasswordRequest,
    UnlockRequest,
)
from warden_accounts.domain.responses import AccountResponse, AccountResponseCode

__all__ = [
    "AccountAction",
    "AccountRequest",
    "AccountResponse",
    "AccountResponseCode",
    "AppCode",
    "ChangePasswordRequest",
    "ConfirmationRequest",
    "ConfirmationToken",
    "GeneratedPassword",
    "Identity",
    "RegistrationRequest",
    "ResetPasswordRequest",
    "Role",
    "UnlockRequest",
]

"""Lifecycle requests.

One frozen dataclass per action; ``action`` is the tag processes use to
recognise the requests they accept.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Union

from warden_accounts.domain.actions import AccountAction


@dataclass(frozen=True)
class RegistrationRequest:
    action: ClassVar[AccountAction] = AccountAction.REGISTRATION

    username: str
    password: str = field(repr=False)
    email: str


@dataclass(frozen=True)
class ConfirmationRequest:
    action: ClassVar[AccountAction] = AccountAction.CONFIRMATION

    token_id: int
    token: str = field(repr=False)


@dataclass(frozen=True)
class UnlockRequest:
    action: ClassVar[AccountAction] = AccountAction.UNLOCK

    user_id: int


@dataclass(frozen=True)
class ResetPasswordRequest:
    action: ClassVar[AccountAction] = AccountAction.RESET_PASSWORD

    email: str


@dataclass(frozen=True)
class ChangePasswordRequest:
    action: ClassVar[AccountAction] = AccountAction.CHANGE_PASSWORD

    user_id: int
    email: str
    actual_password: str = field(repr=False)
    new_password: str = field(repr=False)


AccountRequest = Union[
    RegistrationRequest,
    ConfirmationRequest,
    UnlockRequest,
    ResetPasswordRequest,
    ChangePasswordRequest,
]

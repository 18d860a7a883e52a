"""Lifecycle outcomes.

Every decision a process makes is reported as an ``AccountResponse``
carrying one ``AccountResponseCode``; callers render messages from the
code instead of catching exceptions.
"""

from dataclasses import dataclass
from enum import Enum

from warden_accounts.domain.actions import AccountAction, AppCode

_R = AccountAction.REGISTRATION
_C = AccountAction.CONFIRMATION
_U = AccountAction.UNLOCK
_RP = AccountAction.RESET_PASSWORD
_CP = AccountAction.CHANGE_PASSWORD


class AccountResponseCode(Enum):
    """
    Closed set of lifecycle outcomes.

    Each member carries a numeric id (hundreds digit groups the action),
    the action it belongs to and a human-readable message.

    Examples
    --------
    >>> AccountResponseCode.TOKEN_EXPIRED.id
    203
    >>> AccountResponseCode.from_id(203) is AccountResponseCode.TOKEN_EXPIRED
    True
    """

    EMAIL_IS_NOT_UNIQUE = (102, _R, "This email address is already in use.")
    LOGIN_IS_NOT_UNIQUE = (103, _R, "This login is already in use.")
    UNIQUE_LOGIN_AND_EMAIL = (104, _R, "Login and email address are unique.")
    BAD_REGISTRATION_REQUEST_TYPE = (105, _R, "Bad request type.")
    VERIFICATION_MAIL_FROM_REGISTRATION = (106, _R, "Verification mail was sent.")
    VERIFICATION_MAIL_NOT_SENT_FROM_REGISTRATION = (
        107,
        _R,
        "Account was created but the verification mail was not sent.",
    )
    CONFIRMATION_TOKEN_NOT_CREATED_FROM_REGISTRATION = (
        108,
        _R,
        "Account was created but no confirmation token could be issued.",
    )

    TOKEN_NOT_FOUND = (201, _C, "Token not found.")
    INVALID_TOKEN_VALUE = (202, _C, "Invalid token value.")
    TOKEN_EXPIRED = (203, _C, "Token expired.")
    TOKEN_IS_VALID = (204, _C, "Token is valid.")
    BAD_CONFIRMATION_REQUEST_TYPE = (205, _C, "Bad request type.")
    ACCOUNT_CONFIRMED = (206, _C, "Account confirmed.")

    VERIFICATION_MAIL_FROM_UNLOCK = (302, _U, "Verification mail was sent.")
    ACCOUNT_NOT_EXIST_UNLOCK_ACCOUNT = (303, _U, "Account not exist.")
    ACCOUNT_VERIFIED_AND_NOT_BLOCKED = (
        304,
        _U,
        "Account is verified and not blocked.",
    )
    ACCOUNT_CAN_BE_UNLOCKED = (305, _U, "Account can be unlocked.")
    BAD_UNLOCK_REQUEST_TYPE = (306, _U, "Bad request type.")
    VERIFICATION_MAIL_NOT_SENT_FROM_UNLOCK = (
        307,
        _U,
        "Account was reset but the verification mail was not sent.",
    )
    CONFIRMATION_TOKEN_NOT_CREATED_FROM_UNLOCK = (
        308,
        _U,
        "Account was reset but no confirmation token could be issued.",
    )

    BAD_RESET_PASSWD_REQUEST_TYPE = (403, _RP, "Bad request type.")
    MAIL_NEW_PASSWD_SENT = (404, _RP, "New password mail was sent.")
    ACCOUNT_NOT_EXIST_RESET_PASSWD = (405, _RP, "Account not exist.")
    ACCOUNT_IS_BLOCKED_RESET_PASSWD = (
        406,
        _RP,
        "Account is blocked, unlock it first.",
    )
    ACCOUNT_IS_NOT_VERIFIED = (
        407,
        _RP,
        "Account is not verified, verify account first.",
    )
    PASSWORD_CAN_BE_GENERATED = (408, _RP, "Password can be generated.")
    MAIL_NEW_PASSWD_NOT_SENT = (
        409,
        _RP,
        "Password was generated but the mail was not sent.",
    )

    BAD_CHANGE_PASSWD_REQUEST_TYPE = (501, _CP, "Bad request type.")
    EMAIL_NOT_EXIST_CHANGE_PASSWD = (502, _CP, "Bad email address.")
    ACCOUNT_IS_BLOCKED_CHANGE_PASSWD = (
        503,
        _CP,
        "Account is blocked, unlock it first.",
    )
    BAD_ACTUAL_PASSWORD_CHANGE_PASSWD = (504, _CP, "Bad actual password.")
    PASSWORD_CAN_BE_CHANGED = (505, _CP, "Password can be changed.")
    PASSWORD_CHANGED = (506, _CP, "Password changed.")
    PASSWORD_NOT_CHANGED = (507, _CP, "Password not changed.")
    PASSWORD_CHANGED_BUT_MAIL_NOT_SEND = (
        508,
        _CP,
        "Password was changed but probably information mail wasn't send.",
    )
    MAIL_PASSWD_CHANGED_SENT = (509, _CP, "Password change notice was sent.")

    def __init__(self, code_id: int, action: AccountAction, message: str):
        self.id = code_id
        self.action = action
        self.message = message

    @property
    def app_code(self) -> AppCode:
        return AppCode.AUTH_SERVER

    @classmethod
    def from_id(cls, code_id: int) -> "AccountResponseCode":
        for member in cls:
            if member.id == code_id:
                return member
        msg = f"Unknown account response code: {code_id}"
        raise ValueError(msg)


@dataclass(frozen=True)
class AccountResponse:
    """Outcome of one lifecycle step."""

    success: bool
    code: AccountResponseCode

    @classmethod
    def ok(cls, code: AccountResponseCode) -> "AccountResponse":
        return cls(success=True, code=code)

    @classmethod
    def fail(cls, code: AccountResponseCode) -> "AccountResponse":
        return cls(success=False, code=code)

    @property
    def message(self) -> str:
        return self.code.message

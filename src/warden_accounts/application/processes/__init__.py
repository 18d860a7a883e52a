"""Lifecycle processes, one per AccountAction."""

from warden_accounts.application.processes.base import (
    AccountProcess,
    ConfirmationIssuing,
    Notifier,
    PasswordProcess,
)
from warden_accounts.application.processes.change_password import (
    ChangePasswordProcess,
)
from warden_accounts.application.processes.confirmation import ConfirmationProcess
from warden_accounts.application.processes.registration import RegistrationProcess
from warden_accounts.application.processes.reset_password import (
    ResetPasswordProcess,
)
from warden_accounts.application.processes.unlock import UnlockProcess

__all__ = [
    "AccountProcess",
    "ChangePasswordProcess",
    "ConfirmationIssuing",
    "ConfirmationProcess",
    "Notifier",
    "PasswordProcess",
    "RegistrationProcess",
    "ResetPasswordProcess",
    "UnlockProcess",
]

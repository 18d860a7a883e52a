"""Lifecycle action tags."""

from enum import Enum


class AccountAction(str, Enum):
    """The closed set of lifecycle actions a request can ask for."""

    REGISTRATION = "registration"
    CONFIRMATION = "confirmation"
    UNLOCK = "unlock"
    RESET_PASSWORD = "reset_password"
    CHANGE_PASSWORD = "change_password"


class AppCode(str, Enum):
    """Application identifier carried by every response code."""

    AUTH_SERVER = "WARDEN_AUTH_SERVER"

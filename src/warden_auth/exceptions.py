"""Authentication exceptions.

These exceptions are raised by the warden_auth package and should be
caught and handled by the application layer.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a bearer token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when login or password is incorrect during login."""

    def __init__(self, message: str = "Invalid login credentials"):
        super().__init__(message)


class AccountLockedError(AuthError):
    """Raised when a blocked or unverified account attempts to log in."""

    def __init__(self, message: str = "Account is blocked or not verified"):
        super().__init__(message)

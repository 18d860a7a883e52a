"""Account lifecycle exceptions.

Lifecycle decisions are reported through ``AccountResponse`` values; the
exceptions here signal programming faults only.
"""


class AccountError(Exception):
    """Base exception for account lifecycle faults."""

    def __init__(self, message: str = "Account lifecycle error"):
        self.message = message
        super().__init__(self.message)


class UnsupportedOperationError(AccountError):
    """Raised when a process is asked for a capability it does not have."""

    def __init__(self, process: str, operation: str):
        self.process = process
        self.operation = operation
        super().__init__(f"{process} does not support {operation}()")


class RequestTypeError(AccountError, TypeError):
    """Raised when a process receives a request meant for another action."""

    def __init__(self, process: str, request: object):
        self.process = process
        self.request = request
        super().__init__(f"{process} cannot handle {type(request).__name__}")


class InvalidEmailMessageError(ValueError):
    """Raised when a mail has an invalid recipient or a blank subject or body."""

"""bcrypt hashing for account passwords.

Registration, password change and password reset all store the output of
``PasswordHashingService.hash``; login and the change-password check use
``verify``.
"""

import bcrypt

from warden_auth.exceptions import WeakPasswordError

_ENCODING = "utf-8"


class PasswordHashingService:
    """One-way password hashing with a configurable bcrypt work factor.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> stored = service.hash("pw1")
    >>> service.verify("pw1", stored)
    True
    >>> service.verify("pw2", stored)
    False
    """

    # bcrypt ignores everything past 72 bytes
    MAX_BYTES = 72

    def __init__(self, rounds: int = 12):
        """
        Parameters
        ----------
        rounds
            bcrypt cost (log2 of the iteration count). Tests use 4.
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Return the bcrypt hash of ``password``.

        Raises
        ------
        WeakPasswordError
            If password is empty or longer than bcrypt accepts
        """
        self.validate(password)
        digest = bcrypt.hashpw(
            password.encode(_ENCODING),
            bcrypt.gensalt(rounds=self._rounds),
        )
        return digest.decode(_ENCODING)

    def verify(self, password: str, password_hash: str | None) -> bool:
        """True if ``password`` matches ``password_hash``.

        A missing or unparsable hash never matches.
        """
        if not password_hash:
            return False
        try:
            return bcrypt.checkpw(password.encode(_ENCODING), password_hash.encode(_ENCODING))
        except (ValueError, TypeError):
            return False

    def validate(self, password: str) -> None:
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        size = len(password.encode(_ENCODING))
        if size > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes (got {size})"
            raise WeakPasswordError(msg)

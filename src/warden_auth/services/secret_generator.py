"""Random secrets handed out to users.

Both generators draw from :mod:`secrets`; a predictable confirmation token
or generated password is an account takeover.
"""

import secrets
import string


class ConfirmationTokenGenerator:
    """Generates opaque alphanumeric confirmation tokens."""

    ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
    DEFAULT_LENGTH = 100

    def __init__(self, length: int = DEFAULT_LENGTH):
        self._length = self._checked(length)

    def generate(self, length: int | None = None) -> str:
        size = self._length if length is None else self._checked(length)
        return "".join(secrets.choice(self.ALPHABET) for _ in range(size))

    @staticmethod
    def _checked(length: int) -> int:
        if length < 1:
            msg = "Token length must be greater than 0"
            raise ValueError(msg)
        return length


class PasswordGenerator:
    """Generates strong passwords for the reset-password flow.

    Every password holds at least one uppercase letter, one lowercase
    letter, one digit and one special character.
    """

    UPPERCASE = string.ascii_uppercase
    LOWERCASE = string.ascii_lowercase
    DIGITS = string.digits
    SPECIAL = "!@#$%^&*()-_=+"
    DEFAULT_LENGTH = 12

    def __init__(self, length: int = DEFAULT_LENGTH):
        if length < 4:
            msg = "Password length must be at least 4"
            raise ValueError(msg)
        self._length = length

    def generate(self) -> str:
        groups = (self.UPPERCASE, self.LOWERCASE, self.DIGITS, self.SPECIAL)
        everything = "".join(groups)

        chars = [secrets.choice(group) for group in groups]
        chars.extend(secrets.choice(everything) for _ in range(self._length - len(groups)))

        # Fisher-Yates with the CSPRNG so the required characters are not
        # always at the front
        for i in range(len(chars) - 1, 0, -1):
            j = secrets.randbelow(i + 1)
            chars[i], chars[j] = chars[j], chars[i]
        return "".join(chars)

"""Single-use confirmation token."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ConfirmationToken:
    """Opaque secret mailed to a user to confirm an email address or unlock.

    Retiring a token records the retirement and sets ``expires_at`` to the
    retirement time, so an expired token and a consumed token look the same.
    """

    token_id: int
    user_id: int
    token: str
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at

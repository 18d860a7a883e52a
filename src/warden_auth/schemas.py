"""Auth schemas and data structures.

These are simple data classes used for transferring token data
between components.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Protocol


class TokenKind(str, Enum):
    """Bearer token kinds. Both share one structure and differ in lifetime."""

    ACCESS = "access"
    REFRESH = "refresh"


@dataclass(frozen=True)
class RoleClaim:
    """One entry of the ``roles`` claim carried inside a bearer token."""

    id: int
    name: str

    def to_claim(self) -> dict:
        return {"id": self.id, "name": self.name}


class TokenSubject(Protocol):
    """Anything a bearer token can be issued for."""

    @property
    def user_id(self) -> int: ...

    @property
    def email(self) -> str: ...

    @property
    def role_claims(self) -> tuple[RoleClaim, ...]: ...


@dataclass(frozen=True)
class TokenIdentity:
    """Decoded bearer token payload.

    This represents the identity extracted from a verified token.

    Attributes
    ----------
    user_id
        The numeric identifier of the user
    email
        The user's email address
    roles
        The role set the token was issued with
    token_kind
        Either access or refresh
    expires_at
        Token expiration timestamp (UTC)
    """

    user_id: int
    email: str
    roles: tuple[RoleClaim, ...]
    token_kind: TokenKind
    expires_at: datetime

    @property
    def role_names(self) -> frozenset[str]:
        return frozenset(role.name for role in self.roles)

    def is_access_token(self) -> bool:
        return self.token_kind is TokenKind.ACCESS

    def is_refresh_token(self) -> bool:
        return self.token_kind is TokenKind.REFRESH


@dataclass(frozen=True)
class IssuedTokenData:
    """A bearer token as persisted in its per-kind token table."""

    token_id: int
    user_id: int
    token: str
    expires_at: datetime
    kind: TokenKind

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at

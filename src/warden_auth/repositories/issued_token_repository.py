"""Abstract repository interface for issued bearer tokens.

Tokens are pure values; this store exists for callers that want
revocation semantics on top of signature and expiry checks.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from warden_auth.schemas import IssuedTokenData, TokenKind


class IssuedTokenRepository(ABC):
    """Persistence for access and refresh tokens, one table per kind."""

    @abstractmethod
    async def save(
        self,
        kind: TokenKind,
        user_id: int,
        token: str,
        expires_at: datetime,
    ) -> IssuedTokenData:
        """Persist a freshly issued token and return the stored record."""

    @abstractmethod
    async def find_by_id(self, kind: TokenKind, token_id: int) -> IssuedTokenData | None:
        """Find a stored token by its id."""

    @abstractmethod
    async def find_by_token(self, kind: TokenKind, token: str) -> IssuedTokenData | None:
        """Find a stored token by its encoded value."""

    @abstractmethod
    async def is_active(self, kind: TokenKind, token: str) -> bool:
        """True if the token is stored and its stored expiry is in the future."""

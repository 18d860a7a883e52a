"""Confirmation token repository interface."""

from abc import ABC, abstractmethod

from warden_accounts.domain import ConfirmationToken


class ConfirmationTokenRepository(ABC):
    """
    Repository interface for single-use confirmation tokens.

    The store assigns token ids and derives the expiry from its
    configured time-to-live.
    """

    @abstractmethod
    async def create(self, user_id: int, token: str) -> int | None:
        """
        Persist a new token for a user.

        Returns
        -------
        The allocated token id, or None if the store could not allocate one
        """

    @abstractmethod
    async def find_by_id(self, token_id: int) -> ConfirmationToken | None:
        """Find a token by its ID."""

    @abstractmethod
    async def retire(self, token_id: int) -> bool:
        """
        Expire a token now.

        Only a token that is unexpired and not yet retired is retired, in a
        single conditional update. Returns False if the token is unknown,
        expired or already retired, so exactly one of two concurrent callers
        sees True regardless of their clocks.
        """

"""User repository interface."""

from abc import ABC, abstractmethod

from warden_accounts.domain import Identity


class UserRepository(ABC):
    """Repository interface for Identity aggregates.

    Returned identities carry their roles.
    """

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Identity | None:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Identity | None:
        """Find a user by email address, ignoring case."""

    @abstractmethod
    async def find_by_username(self, username: str) -> Identity | None:
        """Find a user by their login name."""

    @abstractmethod
    async def is_blocked(self, user_id: int) -> bool:
        """True if the user exists and is blocked."""

    @abstractmethod
    async def is_verified(self, user_id: int) -> bool:
        """True if the user exists and confirmed their email."""

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def exists_by_username(self, username: str) -> bool:
        """Check if a user exists with the given login name."""

    @abstractmethod
    async def create(self, username: str, email: str, password_hash: str) -> Identity:
        """Persist a new unverified, unblocked user; the store assigns the id."""

    @abstractmethod
    async def update_password_hash(self, user_id: int, password_hash: str) -> bool:
        """Replace the password hash. False if the user does not exist."""

    @abstractmethod
    async def update_status(self, user_id: int, *, blocked: bool, verified: bool) -> bool:
        """Set both status flags. False if the user does not exist."""

    @abstractmethod
    async def unlock(self, user_id: int) -> bool:
        """Mark the user verified and unblocked. False if the user does not exist."""

"""Role association repository interface."""

from abc import ABC, abstractmethod

from warden_accounts.domain import Role


class RoleRepository(ABC):
    """Repository interface for the user-role association."""

    @abstractmethod
    async def find_by_id(self, role_id: int) -> Role | None:
        """Find a role by its ID."""

    @abstractmethod
    async def assign(self, user_id: int, role_id: int) -> None:
        """Attach a role to a user; assigning twice is a no-op."""

    @abstractmethod
    async def find_for_user(self, user_id: int) -> frozenset[Role]:
        """All roles attached to a user."""

"""Abstract repository interface (port) for users."""

from abc import ABC, abstractmethod

from homekeep.domain.entities import User


class UserRepository(ABC):
    """Port for user persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        ...

    @abstractmethod
    async def get_by_username(self, username: str) -> User | None:
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user and return it with the generated ID."""
        ...

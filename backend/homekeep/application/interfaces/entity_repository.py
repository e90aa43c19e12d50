"""Generic repository ports shared by every record collection."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class EntityRepository(ABC, Generic[T]):
    """CRUD contract for a collection keyed by an auto-incrementing integer id.

    Missing ids are never an error at this level: lookups return ``None``
    and deletes return ``False``. Services decide what "not found" means.
    """

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> T | None:
        """Retrieve a single entity by its ID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[T]:
        """Retrieve every entity in insertion order."""
        ...

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Assign the next ID (and creation time, where the entity has one) and persist."""
        ...

    @abstractmethod
    async def update(self, entity_id: int, changes: dict[str, Any]) -> T | None:
        """Shallow-merge ``changes`` over the stored entity. Returns None if absent."""
        ...

    @abstractmethod
    async def delete(self, entity_id: int) -> bool:
        """Delete an entity. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored entities."""
        ...


class CategorizedRepository(EntityRepository[T]):
    """Repository for records carrying an optional ``category_id``."""

    @abstractmethod
    async def get_by_category(self, category_id: int) -> list[T]:
        """Entities whose category_id equals ``category_id``; empty if none."""
        ...

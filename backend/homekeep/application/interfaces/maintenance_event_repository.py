"""Abstract repository interface (port) for maintenance events."""

from abc import abstractmethod

from homekeep.domain.entities import MaintenanceEvent

from .entity_repository import CategorizedRepository


class MaintenanceEventRepository(CategorizedRepository[MaintenanceEvent]):
    """Port for maintenance event persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_recent(self, limit: int) -> list[MaintenanceEvent]:
        """At most ``limit`` events, newest ``created_at`` first."""
        ...

    @abstractmethod
    async def get_timeline(self, limit: int | None = None) -> list[MaintenanceEvent]:
        """Events ordered by event ``date``, latest first, optionally truncated."""
        ...

    @abstractmethod
    async def get_referencing_photo(self, photo_id: int) -> list[MaintenanceEvent]:
        """Events listing ``photo_id`` in photo_ids or receipt_photo_ids."""
        ...

"""Abstract repository interface (port) for photo metadata."""

from abc import abstractmethod

from homekeep.domain.entities import Photo

from .entity_repository import CategorizedRepository


class PhotoRepository(CategorizedRepository[Photo]):
    """Port for photo metadata persistence. Binary content goes through FileStorage."""

    @abstractmethod
    async def get_recent(self, limit: int) -> list[Photo]:
        """At most ``limit`` photos, newest ``created_at`` first."""
        ...

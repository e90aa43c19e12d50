"""Abstract repository interface (port) for notes."""

from abc import abstractmethod

from homekeep.domain.entities import Note

from .entity_repository import CategorizedRepository


class NoteRepository(CategorizedRepository[Note]):
    """Port for note persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_recent(self, limit: int) -> list[Note]:
        """At most ``limit`` notes, newest ``created_at`` first."""
        ...

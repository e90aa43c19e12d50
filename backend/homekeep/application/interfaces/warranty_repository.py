"""Abstract repository interface (port) for warranties."""

from abc import abstractmethod
from datetime import datetime

from homekeep.domain.entities import Warranty

from .entity_repository import CategorizedRepository


class WarrantyRepository(CategorizedRepository[Warranty]):
    """Port for warranty persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_upcoming(self, days: int, now: datetime) -> list[Warranty]:
        """Warranties expiring in ``[now, now + days]``, soonest first."""
        ...

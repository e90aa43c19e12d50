"""Application service (use case) for Warranty operations."""

from datetime import datetime, timezone

from homekeep.application.interfaces import WarrantyRepository
from homekeep.application.schemas import WarrantyCreate, WarrantyUpdate
from homekeep.domain.entities import Warranty
from homekeep.domain.exceptions import EntityNotFoundError

from .reference_guard import ReferenceGuard


class WarrantyService:
    """Orchestrates warranty business logic, including the upcoming-expiration window."""

    def __init__(self, repository: WarrantyRepository, guard: ReferenceGuard):
        self._repository = repository
        self._guard = guard

    async def get_warranty(self, warranty_id: int) -> Warranty:
        warranty = await self._repository.get_by_id(warranty_id)
        if warranty is None:
            raise EntityNotFoundError("Warranty", warranty_id)
        return warranty

    async def list_warranties(self, category_id: int | None = None) -> list[Warranty]:
        if category_id is not None:
            return await self._repository.get_by_category(category_id)
        return await self._repository.get_all()

    async def list_upcoming(self, days: int, now: datetime | None = None) -> list[Warranty]:
        """Warranties expiring between now and ``days`` from now, soonest first."""
        return await self._repository.get_upcoming(days, now or datetime.now(timezone.utc))

    async def create_warranty(self, data: WarrantyCreate) -> Warranty:
        await self._guard.ensure_category(data.category_id)
        warranty = Warranty(
            title=data.title,
            description=data.description,
            location=data.location,
            expiration_date=data.expiration_date,
            category_id=data.category_id,
        )
        return await self._repository.create(warranty)

    async def update_warranty(self, warranty_id: int, data: WarrantyUpdate) -> Warranty:
        await self.get_warranty(warranty_id)
        changes = data.changes()
        await self._guard.ensure_category(changes.get("category_id"))
        warranty = await self._repository.update(warranty_id, changes)
        if warranty is None:
            raise EntityNotFoundError("Warranty", warranty_id)
        return warranty

    async def delete_warranty(self, warranty_id: int) -> bool:
        if not await self._repository.delete(warranty_id):
            raise EntityNotFoundError("Warranty", warranty_id)
        return True

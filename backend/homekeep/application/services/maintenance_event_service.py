"""Application service (use case) for MaintenanceEvent operations."""

from homekeep.application.interfaces import MaintenanceEventRepository
from homekeep.application.schemas import MaintenanceEventCreate, MaintenanceEventUpdate
from homekeep.domain.entities import MaintenanceEvent
from homekeep.domain.exceptions import EntityNotFoundError

from .reference_guard import ReferenceGuard


class MaintenanceEventService:
    """Orchestrates maintenance event logic and the timeline view."""

    def __init__(self, repository: MaintenanceEventRepository, guard: ReferenceGuard):
        self._repository = repository
        self._guard = guard

    async def get_event(self, event_id: int) -> MaintenanceEvent:
        event = await self._repository.get_by_id(event_id)
        if event is None:
            raise EntityNotFoundError("MaintenanceEvent", event_id)
        return event

    async def list_events(self, category_id: int | None = None) -> list[MaintenanceEvent]:
        if category_id is not None:
            return await self._repository.get_by_category(category_id)
        return await self._repository.get_all()

    async def list_recent(self, limit: int) -> list[MaintenanceEvent]:
        return await self._repository.get_recent(limit)

    async def list_timeline(self, limit: int | None = None) -> list[MaintenanceEvent]:
        return await self._repository.get_timeline(limit)

    async def create_event(self, data: MaintenanceEventCreate) -> MaintenanceEvent:
        await self._check_references(
            data.category_id, data.photo_ids, data.receipt_photo_ids
        )
        event = MaintenanceEvent(
            title=data.title,
            description=data.description,
            cost=data.cost,
            photo_ids=data.photo_ids,
            receipt_photo_ids=data.receipt_photo_ids,
            category_id=data.category_id,
            date=data.date,
        )
        return await self._repository.create(event)

    async def update_event(
        self, event_id: int, data: MaintenanceEventUpdate
    ) -> MaintenanceEvent:
        await self.get_event(event_id)
        changes = data.changes()
        await self._check_references(
            changes.get("category_id"),
            changes.get("photo_ids"),
            changes.get("receipt_photo_ids"),
        )
        event = await self._repository.update(event_id, changes)
        if event is None:
            raise EntityNotFoundError("MaintenanceEvent", event_id)
        return event

    async def delete_event(self, event_id: int) -> bool:
        if not await self._repository.delete(event_id):
            raise EntityNotFoundError("MaintenanceEvent", event_id)
        return True

    async def _check_references(
        self,
        category_id: int | None,
        photo_ids: list[int] | None,
        receipt_photo_ids: list[int] | None,
    ) -> None:
        await self._guard.ensure_category(category_id)
        await self._guard.ensure_photos("photoIds", photo_ids)
        await self._guard.ensure_photos("receiptPhotoIds", receipt_photo_ids)

"""Dashboard aggregate: the numbers behind the status cards."""

from datetime import datetime, timezone

from homekeep.application.interfaces import (
    CategoryRepository,
    MaintenanceEventRepository,
    NoteRepository,
    PhotoRepository,
    WarrantyRepository,
)
from homekeep.application.schemas import DashboardSummary


class DashboardService:
    def __init__(
        self,
        *,
        categories: CategoryRepository,
        photos: PhotoRepository,
        notes: NoteRepository,
        warranties: WarrantyRepository,
        events: MaintenanceEventRepository,
        upcoming_window_days: int = 30,
    ):
        self._categories = categories
        self._photos = photos
        self._notes = notes
        self._warranties = warranties
        self._events = events
        self._window_days = upcoming_window_days

    async def summary(self, now: datetime | None = None) -> DashboardSummary:
        now = now or datetime.now(timezone.utc)

        photos = await self._photos.count()
        notes = await self._notes.count()
        warranties = await self._warranties.count()
        events = await self._events.count()
        upcoming = await self._warranties.get_upcoming(self._window_days, now)
        latest_note = await self._notes.get_recent(1)

        return DashboardSummary(
            total_records=photos + notes + warranties + events,
            upcoming_expirations=len(upcoming),
            photos_stored=photos,
            maintenance_notes=notes,
            maintenance_events=events,
            categories=await self._categories.count(),
            last_note_date=latest_note[0].created_at if latest_note else None,
        )

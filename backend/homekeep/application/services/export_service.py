"""Full data export: every collection in a single document."""

import logging
from datetime import datetime, timezone
from typing import Any

from homekeep.application.interfaces import (
    CategoryRepository,
    MaintenanceEventRepository,
    NoteRepository,
    PhotoRepository,
    WarrantyRepository,
)

logger = logging.getLogger(__name__)


class ExportService:
    """Snapshots all record collections. Users are not exported."""

    def __init__(
        self,
        *,
        categories: CategoryRepository,
        photos: PhotoRepository,
        notes: NoteRepository,
        warranties: WarrantyRepository,
        events: MaintenanceEventRepository,
    ):
        self._categories = categories
        self._photos = photos
        self._notes = notes
        self._warranties = warranties
        self._events = events

    async def export(self) -> dict[str, Any]:
        snapshot = {
            "exported_at": datetime.now(timezone.utc),
            "categories": await self._categories.get_all(),
            "photos": await self._photos.get_all(),
            "notes": await self._notes.get_all(),
            "warranties": await self._warranties.get_all(),
            "maintenance_events": await self._events.get_all(),
        }
        logger.info(
            "Exported %s",
            ", ".join(f"{len(v)} {k}" for k, v in snapshot.items() if isinstance(v, list)),
        )
        return snapshot

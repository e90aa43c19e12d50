"""Domain entity: a dated maintenance event on the home timeline."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class MaintenanceEvent:
    """A piece of work done on the home.

    ``photo_ids`` and ``receipt_photo_ids`` reference Photo ids; ``cost`` is
    free text ("$120", "about 80 EUR") exactly as the user typed it.
    """

    title: str
    description: str
    date: datetime
    cost: str | None = None
    photo_ids: list[int] | None = None
    receipt_photo_ids: list[int] | None = None
    category_id: int | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def references_photo(self, photo_id: int) -> bool:
        return photo_id in (self.photo_ids or []) or photo_id in (self.receipt_photo_ids or [])

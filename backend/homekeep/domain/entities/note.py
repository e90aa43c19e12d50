"""Domain entity: a free-form maintenance note."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Note:
    title: str
    content: str
    category_id: int | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

"""Domain entity: a warranty or any other dated expiration."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone


@dataclass
class Warranty:
    """Something that expires: an appliance warranty, a filter, a permit."""

    title: str
    expiration_date: datetime
    description: str | None = None
    location: str | None = None
    category_id: int | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def expires_within(self, days: int, now: datetime) -> bool:
        """True when the expiration falls inside ``[now, now + days]``, both ends included."""
        return now <= self.expiration_date <= now + timedelta(days=days)

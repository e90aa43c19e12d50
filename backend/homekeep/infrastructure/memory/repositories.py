"""Repository adapters over the in-memory store.

Every method runs to completion without awaiting, so a single request's
read-modify-write can never interleave with another one on the event loop.
"""

from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from homekeep.application.interfaces import (
    CategoryRepository,
    MaintenanceEventRepository,
    NoteRepository,
    PhotoRepository,
    UserRepository,
    WarrantyRepository,
)
from homekeep.domain.entities import (
    Category,
    MaintenanceEvent,
    Note,
    Photo,
    User,
    Warranty,
)

from .store import InMemoryStore

T = TypeVar("T")


class _InMemoryCollection(Generic[T]):
    """Shared CRUD over one collection of the store."""

    collection: str

    def __init__(self, store: InMemoryStore):
        self._store = store

    @property
    def _rows(self) -> dict[int, T]:
        return self._store.table(self.collection)

    async def get_by_id(self, entity_id: int) -> T | None:
        return self._rows.get(entity_id)

    async def get_all(self) -> list[T]:
        return list(self._rows.values())

    async def create(self, entity: T) -> T:
        stored = replace(entity, id=self._store.next_id(self.collection))
        if hasattr(stored, "created_at"):
            stored.created_at = datetime.now(timezone.utc)
        self._rows[stored.id] = stored
        return stored

    async def update(self, entity_id: int, changes: dict[str, Any]) -> T | None:
        current = self._rows.get(entity_id)
        if current is None:
            return None
        changes = {k: v for k, v in changes.items() if k not in ("id", "created_at")}
        merged = replace(current, **changes)
        self._rows[entity_id] = merged
        return merged

    async def delete(self, entity_id: int) -> bool:
        return self._rows.pop(entity_id, None) is not None

    async def count(self) -> int:
        return len(self._rows)

    async def get_by_category(self, category_id: int) -> list[T]:
        return [e for e in self._rows.values() if e.category_id == category_id]

    async def get_recent(self, limit: int) -> list[T]:
        ordered = sorted(
            self._rows.values(), key=lambda e: (e.created_at, e.id), reverse=True
        )
        return ordered[: max(limit, 0)]


class InMemoryCategoryRepository(_InMemoryCollection[Category], CategoryRepository):
    collection = "categories"


class InMemoryPhotoRepository(_InMemoryCollection[Photo], PhotoRepository):
    collection = "photos"


class InMemoryNoteRepository(_InMemoryCollection[Note], NoteRepository):
    collection = "notes"


class InMemoryWarrantyRepository(_InMemoryCollection[Warranty], WarrantyRepository):
    collection = "warranties"

    async def get_upcoming(self, days: int, now: datetime) -> list[Warranty]:
        upcoming = [w for w in self._rows.values() if w.expires_within(days, now)]
        return sorted(upcoming, key=lambda w: (w.expiration_date, w.id))


class InMemoryMaintenanceEventRepository(
    _InMemoryCollection[MaintenanceEvent], MaintenanceEventRepository
):
    collection = "maintenance_events"

    async def get_timeline(self, limit: int | None = None) -> list[MaintenanceEvent]:
        ordered = sorted(self._rows.values(), key=lambda e: (e.date, e.id), reverse=True)
        return ordered if limit is None else ordered[: max(limit, 0)]

    async def get_referencing_photo(self, photo_id: int) -> list[MaintenanceEvent]:
        return [e for e in self._rows.values() if e.references_photo(photo_id)]


class InMemoryUserRepository(UserRepository):
    collection = "users"

    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get_by_id(self, user_id: int) -> User | None:
        return self._store.table(self.collection).get(user_id)

    async def get_by_username(self, username: str) -> User | None:
        for user in self._store.table(self.collection).values():
            if user.username == username:
                return user
        return None

    async def create(self, user: User) -> User:
        stored = replace(user, id=self._store.next_id(self.collection))
        self._store.table(self.collection)[stored.id] = stored
        return stored

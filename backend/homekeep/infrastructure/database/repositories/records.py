"""Concrete repository implementations for the record collections, backed by SQLAlchemy.

ORM attribute names mirror the domain dataclass fields one to one, so the
entity ↔ model mapping is done field by field in the shared base.
"""

from dataclasses import fields
from datetime import datetime, timedelta, timezone
from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from homekeep.application.interfaces import (
    CategoryRepository,
    MaintenanceEventRepository,
    NoteRepository,
    PhotoRepository,
    WarrantyRepository,
)
from homekeep.domain.entities import Category, MaintenanceEvent, Note, Photo, Warranty
from homekeep.infrastructure.database.base import Base
from homekeep.infrastructure.database.models import (
    CategoryModel,
    MaintenanceEventModel,
    NoteModel,
    PhotoModel,
    WarrantyModel,
)

T = TypeVar("T")

_IMMUTABLE_FIELDS = frozenset({"id", "created_at"})

# Primary and foreign keys are signed 64-bit columns.
MAX_ID = 2**63 - 1


def storable_id(value: int) -> bool:
    return 0 < value <= MAX_ID


def _utc(value: Any) -> Any:
    # SQLite hands timestamps back without tzinfo; everything is stored as UTC.
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class _SQLAlchemyCollection(Generic[T]):
    """Shared CRUD for a model/entity pair."""

    model: type[Base]
    entity: type

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: Base) -> T:
        """Map ORM model → domain entity."""
        return self.entity(
            **{f.name: _utc(getattr(model, f.name)) for f in fields(self.entity)}
        )

    def _to_model(self, entity: T) -> Base:
        """Map domain entity → ORM model (for creation)."""
        return self.model(
            **{f.name: getattr(entity, f.name) for f in fields(entity) if f.name != "id"}
        )

    async def get_by_id(self, entity_id: int) -> T | None:
        if not storable_id(entity_id):
            return None
        result = await self._session.get(self.model, entity_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[T]:
        result = await self._session.execute(select(self.model).order_by(self.model.id))
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, entity: T) -> T:
        model = self._to_model(entity)
        if hasattr(model, "created_at"):
            model.created_at = datetime.now(timezone.utc)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, entity_id: int, changes: dict[str, Any]) -> T | None:
        if not storable_id(entity_id):
            return None
        model = await self._session.get(self.model, entity_id)
        if model is None:
            return None
        for key, value in changes.items():
            if key not in _IMMUTABLE_FIELDS:
                setattr(model, key, value)
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, entity_id: int) -> bool:
        if not storable_id(entity_id):
            return False
        model = await self._session.get(self.model, entity_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(self.model))
        return result.scalar_one()

    async def get_by_category(self, category_id: int) -> list[T]:
        if not storable_id(category_id):
            return []
        stmt = (
            select(self.model)
            .where(self.model.category_id == category_id)
            .order_by(self.model.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_recent(self, limit: int) -> list[T]:
        stmt = (
            select(self.model)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .limit(max(limit, 0))
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]


class SQLAlchemyCategoryRepository(_SQLAlchemyCollection[Category], CategoryRepository):
    model = CategoryModel
    entity = Category


class SQLAlchemyPhotoRepository(_SQLAlchemyCollection[Photo], PhotoRepository):
    model = PhotoModel
    entity = Photo


class SQLAlchemyNoteRepository(_SQLAlchemyCollection[Note], NoteRepository):
    model = NoteModel
    entity = Note


class SQLAlchemyWarrantyRepository(_SQLAlchemyCollection[Warranty], WarrantyRepository):
    model = WarrantyModel
    entity = Warranty

    async def get_upcoming(self, days: int, now: datetime) -> list[Warranty]:
        stmt = (
            select(WarrantyModel)
            .where(
                WarrantyModel.expiration_date >= now,
                WarrantyModel.expiration_date <= now + timedelta(days=days),
            )
            .order_by(WarrantyModel.expiration_date.asc(), WarrantyModel.id.asc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]


class SQLAlchemyMaintenanceEventRepository(
    _SQLAlchemyCollection[MaintenanceEvent], MaintenanceEventRepository
):
    model = MaintenanceEventModel
    entity = MaintenanceEvent

    async def get_timeline(self, limit: int | None = None) -> list[MaintenanceEvent]:
        stmt = select(MaintenanceEventModel).order_by(
            MaintenanceEventModel.date.desc(), MaintenanceEventModel.id.desc()
        )
        if limit is not None:
            stmt = stmt.limit(min(max(limit, 0), MAX_ID))
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_referencing_photo(self, photo_id: int) -> list[MaintenanceEvent]:
        # JSON containment differs per dialect; the collection is small enough to filter here.
        return [e for e in await self.get_all() if e.references_photo(photo_id)]

"""Unit tests for the note, warranty and maintenance event services."""

from datetime import datetime, timedelta, timezone

import pytest

from homekeep.application.schemas import (
    MaintenanceEventCreate,
    MaintenanceEventUpdate,
    NoteCreate,
    NoteUpdate,
    WarrantyCreate,
    WarrantyUpdate,
)
from homekeep.application.services import (
    MaintenanceEventService,
    NoteService,
    ReferenceGuard,
    WarrantyService,
)
from homekeep.domain.entities import Category, Photo
from homekeep.domain.exceptions import EntityNotFoundError, InvalidReferenceError
from homekeep.infrastructure.memory import (
    InMemoryCategoryRepository,
    InMemoryMaintenanceEventRepository,
    InMemoryNoteRepository,
    InMemoryPhotoRepository,
    InMemoryStore,
    InMemoryWarrantyRepository,
)

NOW = datetime(2026, 6, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def guard(store: InMemoryStore) -> ReferenceGuard:
    return ReferenceGuard(InMemoryCategoryRepository(store), InMemoryPhotoRepository(store))


@pytest.fixture
def notes(store: InMemoryStore, guard: ReferenceGuard) -> NoteService:
    return NoteService(InMemoryNoteRepository(store), guard)


@pytest.fixture
def warranties(store: InMemoryStore, guard: ReferenceGuard) -> WarrantyService:
    return WarrantyService(InMemoryWarrantyRepository(store), guard)


@pytest.fixture
def events(store: InMemoryStore, guard: ReferenceGuard) -> MaintenanceEventService:
    return MaintenanceEventService(InMemoryMaintenanceEventRepository(store), guard)


# ── Notes ────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_note_with_known_category(notes: NoteService, store: InMemoryStore):
    category = await InMemoryCategoryRepository(store).create(Category(name="HVAC", color="#f59e0b"))
    note = await notes.create_note(
        NoteCreate(title="Filter", content="MERV 11", category_id=category.id)
    )
    assert [n.id for n in await notes.list_notes(category.id)] == [note.id]


@pytest.mark.asyncio
async def test_note_with_unknown_category_is_rejected(notes: NoteService):
    with pytest.raises(InvalidReferenceError):
        await notes.create_note(NoteCreate(title="Filter", content="MERV 11", category_id=9))


@pytest.mark.asyncio
async def test_note_update_can_clear_category(notes: NoteService, store: InMemoryStore):
    category = await InMemoryCategoryRepository(store).create(Category(name="HVAC", color="#fff"))
    note = await notes.create_note(NoteCreate(title="t", content="c", category_id=category.id))

    updated = await notes.update_note(note.id, NoteUpdate(category_id=None))
    assert updated.category_id is None


@pytest.mark.asyncio
async def test_delete_missing_note(notes: NoteService):
    with pytest.raises(EntityNotFoundError):
        await notes.delete_note(1)


# ── Warranties ───────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_list_upcoming_uses_requested_window(warranties: WarrantyService):
    await warranties.create_warranty(
        WarrantyCreate(title="Dishwasher", expiration_date=NOW + timedelta(days=10))
    )

    assert len(await warranties.list_upcoming(30, now=NOW)) == 1
    assert await warranties.list_upcoming(3, now=NOW) == []


@pytest.mark.asyncio
async def test_warranty_naive_dates_are_treated_as_utc(warranties: WarrantyService):
    warranty = await warranties.create_warranty(
        WarrantyCreate(title="Roof", expiration_date=datetime(2027, 1, 1))
    )
    assert warranty.expiration_date == datetime(2027, 1, 1, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_warranty_update_moves_expiration(warranties: WarrantyService):
    warranty = await warranties.create_warranty(
        WarrantyCreate(title="Fridge", expiration_date=NOW + timedelta(days=400))
    )
    await warranties.update_warranty(
        warranty.id, WarrantyUpdate(expiration_date=NOW + timedelta(days=5))
    )
    assert [w.id for w in await warranties.list_upcoming(30, now=NOW)] == [warranty.id]


# ── Maintenance events ───────────────────────────────────────────────


@pytest.mark.asyncio
async def test_event_with_unknown_photo_is_rejected(events: MaintenanceEventService):
    with pytest.raises(InvalidReferenceError) as exc_info:
        await events.create_event(
            MaintenanceEventCreate(
                title="Sump pump", description="Tested", date=NOW, receipt_photo_ids=[4]
            )
        )
    assert exc_info.value.field == "receiptPhotoIds"


@pytest.mark.asyncio
async def test_event_with_known_photos(events: MaintenanceEventService, store: InMemoryStore):
    photo = await InMemoryPhotoRepository(store).create(
        Photo(title="Receipt", file_path="photo_1.jpg", content_type="image/jpeg")
    )
    event = await events.create_event(
        MaintenanceEventCreate(
            title="Sump pump",
            description="Replaced",
            cost="$240",
            date=NOW,
            receipt_photo_ids=[photo.id],
        )
    )
    assert event.receipt_photo_ids == [photo.id]
    assert event.cost == "$240"


@pytest.mark.asyncio
async def test_timeline_and_recent(events: MaintenanceEventService):
    for days_ago, title in ((30, "gutters"), (1, "smoke alarms"), (90, "chimney")):
        await events.create_event(
            MaintenanceEventCreate(
                title=title, description="done", date=NOW - timedelta(days=days_ago)
            )
        )

    assert [e.title for e in await events.list_timeline()] == [
        "smoke alarms",
        "gutters",
        "chimney",
    ]
    assert [e.title for e in await events.list_recent(2)] == ["chimney", "smoke alarms"]


@pytest.mark.asyncio
async def test_event_partial_update(events: MaintenanceEventService):
    event = await events.create_event(
        MaintenanceEventCreate(title="Deck", description="Stained", date=NOW)
    )
    updated = await events.update_event(event.id, MaintenanceEventUpdate(cost="$80"))
    assert updated.cost == "$80"
    assert updated.title == "Deck"
    assert updated.date == NOW

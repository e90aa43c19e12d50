"""Unit tests for the dashboard aggregate and the full export."""

from datetime import datetime, timedelta, timezone

import pytest

from homekeep.application.services import DashboardService, ExportService
from homekeep.domain.entities import Category, MaintenanceEvent, Note, Photo, User, Warranty
from homekeep.infrastructure.memory import (
    InMemoryCategoryRepository,
    InMemoryMaintenanceEventRepository,
    InMemoryNoteRepository,
    InMemoryPhotoRepository,
    InMemoryStore,
    InMemoryUserRepository,
    InMemoryWarrantyRepository,
)

NOW = datetime(2026, 2, 1, tzinfo=timezone.utc)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


def _repos(store: InMemoryStore) -> dict:
    return {
        "categories": InMemoryCategoryRepository(store),
        "photos": InMemoryPhotoRepository(store),
        "notes": InMemoryNoteRepository(store),
        "warranties": InMemoryWarrantyRepository(store),
        "events": InMemoryMaintenanceEventRepository(store),
    }


@pytest.mark.asyncio
async def test_summary_of_empty_store(store: InMemoryStore):
    summary = await DashboardService(**_repos(store)).summary(now=NOW)

    assert summary.total_records == 0
    assert summary.upcoming_expirations == 0
    assert summary.categories == 0
    assert summary.last_note_date is None


@pytest.mark.asyncio
async def test_summary_counts(store: InMemoryStore):
    repos = _repos(store)
    await repos["categories"].create(Category(name="Garden", color="#ec4899"))
    await repos["photos"].create(Photo(title="p", file_path="photo_1.jpg", content_type="image/jpeg"))
    first = await repos["notes"].create(Note(title="a", content="c"))
    latest = await repos["notes"].create(Note(title="b", content="c"))
    await repos["warranties"].create(Warranty(title="soon", expiration_date=NOW + timedelta(days=7)))
    await repos["warranties"].create(Warranty(title="late", expiration_date=NOW + timedelta(days=70)))
    await repos["events"].create(MaintenanceEvent(title="e", description="d", date=NOW))

    summary = await DashboardService(**repos, upcoming_window_days=30).summary(now=NOW)

    assert summary.total_records == 6
    assert summary.upcoming_expirations == 1
    assert summary.photos_stored == 1
    assert summary.maintenance_notes == 2
    assert summary.maintenance_events == 1
    assert summary.categories == 1
    assert summary.last_note_date == latest.created_at
    assert summary.last_note_date >= first.created_at


@pytest.mark.asyncio
async def test_export_contains_every_collection_but_users(store: InMemoryStore):
    repos = _repos(store)
    await repos["categories"].create(Category(name="Garden", color="#ec4899"))
    await repos["notes"].create(Note(title="Mulch", content="Spread"))
    await InMemoryUserRepository(store).create(User(username="sam", password_hash="x"))

    snapshot = await ExportService(**repos).export()

    assert set(snapshot) == {
        "exported_at",
        "categories",
        "photos",
        "notes",
        "warranties",
        "maintenance_events",
    }
    assert [c.name for c in snapshot["categories"]] == ["Garden"]
    assert [n.title for n in snapshot["notes"]] == ["Mulch"]
    assert snapshot["photos"] == []

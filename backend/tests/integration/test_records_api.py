"""End-to-end tests for notes, warranties and maintenance events."""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient


def _iso(value: datetime) -> str:
    return value.isoformat()


# ── Notes ────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_note_crud_and_category_filter(client: AsyncClient):
    await client.post("/api/v1/categories", json={"name": "HVAC", "color": "#f59e0b"})
    first = await client.post(
        "/api/v1/notes", json={"title": "Filter", "content": "MERV 11", "categoryId": 1}
    )
    await client.post("/api/v1/notes", json={"title": "Loose", "content": "No category"})

    assert first.status_code == 201
    body = first.json()
    assert body["categoryId"] == 1
    assert "createdAt" in body

    filtered = await client.get("/api/v1/notes", params={"categoryId": 1})
    assert [n["title"] for n in filtered.json()] == ["Filter"]

    updated = await client.put("/api/v1/notes/1", json={"content": "MERV 13"})
    assert updated.json()["content"] == "MERV 13"
    assert updated.json()["title"] == "Filter"

    assert (await client.delete("/api/v1/notes/1")).status_code == 204
    assert (await client.get("/api/v1/notes/1")).status_code == 404


@pytest.mark.asyncio
async def test_note_with_unknown_category_returns_400(client: AsyncClient):
    response = await client.post(
        "/api/v1/notes", json={"title": "Filter", "content": "MERV 11", "categoryId": 5}
    )
    assert response.status_code == 400
    assert "categoryId" in response.json()["message"]


@pytest.mark.asyncio
async def test_recent_notes(client: AsyncClient):
    for i in range(4):
        await client.post("/api/v1/notes", json={"title": f"n{i}", "content": "c"})

    default = await client.get("/api/v1/notes/recent")
    assert [n["title"] for n in default.json()] == ["n3", "n2", "n1"]

    limited = await client.get("/api/v1/notes/recent", params={"limit": 1})
    assert [n["title"] for n in limited.json()] == ["n3"]

    assert (await client.delete("/api/v1/notes/4")).status_code == 204
    after_delete = await client.get("/api/v1/notes/recent")
    assert [n["title"] for n in after_delete.json()] == ["n2", "n1", "n0"]


@pytest.mark.asyncio
async def test_recent_default_comes_from_settings(client: AsyncClient, settings):
    settings.recent_limit = 2
    for i in range(4):
        await client.post("/api/v1/notes", json={"title": f"n{i}", "content": "c"})
        await client.post(
            "/api/v1/maintenance-events",
            json={"title": f"e{i}", "description": "d", "date": f"2026-01-0{i + 1}T00:00:00Z"},
        )

    notes = await client.get("/api/v1/notes/recent")
    assert [n["title"] for n in notes.json()] == ["n3", "n2"]

    events = await client.get("/api/v1/maintenance-events/recent")
    assert [e["title"] for e in events.json()] == ["e3", "e2"]

    explicit = await client.get("/api/v1/notes/recent", params={"limit": 4})
    assert len(explicit.json()) == 4


# ── Warranties ───────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_upcoming_warranties_window(client: AsyncClient):
    expires = datetime.now(timezone.utc) + timedelta(days=5)
    created = await client.post(
        "/api/v1/warranties",
        json={"title": "Dishwasher", "expirationDate": _iso(expires), "location": "Kitchen"},
    )
    assert created.status_code == 201

    within_30 = await client.get("/api/v1/warranties/upcoming", params={"days": 30})
    assert [w["title"] for w in within_30.json()] == ["Dishwasher"]

    within_3 = await client.get("/api/v1/warranties/upcoming", params={"days": 3})
    assert within_3.json() == []


@pytest.mark.asyncio
async def test_upcoming_defaults_to_thirty_days(client: AsyncClient):
    now = datetime.now(timezone.utc)
    await client.post(
        "/api/v1/warranties", json={"title": "in", "expirationDate": _iso(now + timedelta(days=29))}
    )
    await client.post(
        "/api/v1/warranties", json={"title": "out", "expirationDate": _iso(now + timedelta(days=31))}
    )
    await client.post(
        "/api/v1/warranties", json={"title": "gone", "expirationDate": _iso(now - timedelta(days=1))}
    )

    response = await client.get("/api/v1/warranties/upcoming")
    assert [w["title"] for w in response.json()] == ["in"]


@pytest.mark.asyncio
async def test_warranty_requires_expiration_date(client: AsyncClient):
    response = await client.post("/api/v1/warranties", json={"title": "Roof"})
    assert response.status_code == 400


# ── Maintenance events ───────────────────────────────────────────────


@pytest.mark.asyncio
async def test_event_timeline_is_ordered_by_date(client: AsyncClient):
    now = datetime.now(timezone.utc)
    for days_ago, title in ((30, "gutters"), (1, "smoke alarms"), (90, "chimney")):
        response = await client.post(
            "/api/v1/maintenance-events",
            json={
                "title": title,
                "description": "done",
                "date": _iso(now - timedelta(days=days_ago)),
                "cost": "$50",
            },
        )
        assert response.status_code == 201

    timeline = await client.get("/api/v1/maintenance-events/timeline")
    assert [e["title"] for e in timeline.json()] == ["smoke alarms", "gutters", "chimney"]

    limited = await client.get("/api/v1/maintenance-events/timeline", params={"limit": 2})
    assert len(limited.json()) == 2

    recent = await client.get("/api/v1/maintenance-events/recent")
    assert [e["title"] for e in recent.json()] == ["chimney", "smoke alarms", "gutters"]


@pytest.mark.asyncio
async def test_event_with_unknown_photo_returns_400(client: AsyncClient):
    response = await client.post(
        "/api/v1/maintenance-events",
        json={
            "title": "Sump pump",
            "description": "Replaced",
            "date": "2026-01-10T00:00:00Z",
            "photoIds": [12],
        },
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_event_update_and_delete(client: AsyncClient):
    await client.post(
        "/api/v1/maintenance-events",
        json={"title": "Deck", "description": "Stained", "date": "2026-04-02T00:00:00Z"},
    )

    updated = await client.put("/api/v1/maintenance-events/1", json={"cost": "$80"})
    assert updated.status_code == 200
    assert updated.json()["cost"] == "$80"
    assert updated.json()["title"] == "Deck"

    assert (await client.delete("/api/v1/maintenance-events/1")).status_code == 204
    assert (await client.delete("/api/v1/maintenance-events/1")).status_code == 404

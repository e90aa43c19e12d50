"""End-to-end tests for the category endpoints."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_category_lifecycle(client: AsyncClient):
    created = await client.post("/api/v1/categories", json={"name": "Plumbing", "color": "#3b82f6"})
    assert created.status_code == 201
    assert created.json() == {"id": 1, "name": "Plumbing", "color": "#3b82f6"}

    fetched = await client.get("/api/v1/categories/1")
    assert fetched.status_code == 200
    assert fetched.json()["name"] == "Plumbing"

    deleted = await client.delete("/api/v1/categories/1")
    assert deleted.status_code == 204

    missing = await client.get("/api/v1/categories/1")
    assert missing.status_code == 404
    assert "not found" in missing.json()["message"]


@pytest.mark.asyncio
async def test_ids_are_not_reused_after_delete(client: AsyncClient):
    await client.post("/api/v1/categories", json={"name": "A", "color": "#111111"})
    await client.delete("/api/v1/categories/1")
    again = await client.post("/api/v1/categories", json={"name": "B", "color": "#222222"})

    assert again.json()["id"] == 2


@pytest.mark.asyncio
async def test_partial_update(client: AsyncClient):
    await client.post("/api/v1/categories", json={"name": "Garden", "color": "#ec4899"})

    response = await client.put("/api/v1/categories/1", json={"name": "Yard"})

    assert response.status_code == 200
    assert response.json() == {"id": 1, "name": "Yard", "color": "#ec4899"}


@pytest.mark.asyncio
async def test_update_and_delete_unknown_category(client: AsyncClient):
    assert (await client.put("/api/v1/categories/9", json={"name": "x"})).status_code == 404
    assert (await client.delete("/api/v1/categories/9")).status_code == 404


@pytest.mark.asyncio
async def test_invalid_payload_returns_400(client: AsyncClient):
    response = await client.post("/api/v1/categories", json={"name": "Plumbing"})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid request data"
    assert body["errors"]


@pytest.mark.asyncio
async def test_null_for_required_field_returns_400(client: AsyncClient):
    await client.post("/api/v1/categories", json={"name": "Garden", "color": "#ec4899"})

    response = await client.put("/api/v1/categories/1", json={"name": None})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_referenced_category_cannot_be_deleted(client: AsyncClient):
    await client.post("/api/v1/categories", json={"name": "HVAC", "color": "#f59e0b"})
    await client.post(
        "/api/v1/notes", json={"title": "Filter", "content": "Changed", "categoryId": 1}
    )

    response = await client.delete("/api/v1/categories/1")

    assert response.status_code == 409
    assert "1 notes" in response.json()["message"]
    assert (await client.get("/api/v1/categories/1")).status_code == 200

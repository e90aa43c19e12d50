"""End-to-end tests for user registration and lookup."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_register_and_fetch_user(client: AsyncClient):
    created = await client.post(
        "/api/v1/users", json={"username": "sam", "password": "s3cret-pass"}
    )

    assert created.status_code == 201
    assert created.json() == {"id": 1, "username": "sam"}

    fetched = await client.get("/api/v1/users/1")
    assert fetched.json() == {"id": 1, "username": "sam"}


@pytest.mark.asyncio
async def test_duplicate_username_returns_409(client: AsyncClient):
    await client.post("/api/v1/users", json={"username": "sam", "password": "s3cret-pass"})

    response = await client.post(
        "/api/v1/users", json={"username": "sam", "password": "other-pass"}
    )

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_short_password_returns_400(client: AsyncClient):
    response = await client.post("/api/v1/users", json={"username": "sam", "password": "short"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_unknown_user_returns_404(client: AsyncClient):
    assert (await client.get("/api/v1/users/3")).status_code == 404

"""Pydantic DTOs for the MaintenanceEvent feature."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from .common import ApiModel, PartialUpdate, UtcDatetime


class MaintenanceEventCreate(ApiModel):
    """Schema for creating a new maintenance event."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Replaced furnace filter"])
    description: str = Field(..., min_length=1)
    cost: str | None = Field(None, max_length=50, examples=["$35"])
    photo_ids: list[int] | None = None
    receipt_photo_ids: list[int] | None = None
    category_id: int | None = None
    date: UtcDatetime


class MaintenanceEventUpdate(PartialUpdate):
    """Schema for updating an existing maintenance event: all fields optional."""

    required_fields: ClassVar[frozenset[str]] = frozenset({"title", "description", "date"})

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    cost: str | None = Field(None, max_length=50)
    photo_ids: list[int] | None = None
    receipt_photo_ids: list[int] | None = None
    category_id: int | None = None
    date: UtcDatetime | None = None


class MaintenanceEventResponse(ApiModel):
    id: int
    title: str
    description: str
    cost: str | None
    photo_ids: list[int] | None
    receipt_photo_ids: list[int] | None
    category_id: int | None
    date: datetime
    created_at: datetime

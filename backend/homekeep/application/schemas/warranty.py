"""Pydantic DTOs for the Warranty feature."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from .common import ApiModel, PartialUpdate, UtcDatetime


class WarrantyCreate(ApiModel):
    """Schema for creating a new warranty or expiration."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Dishwasher warranty"])
    description: str | None = None
    location: str | None = Field(None, max_length=255, examples=["Kitchen"])
    expiration_date: UtcDatetime
    category_id: int | None = None


class WarrantyUpdate(PartialUpdate):
    """Schema for updating an existing warranty: all fields optional."""

    required_fields: ClassVar[frozenset[str]] = frozenset({"title", "expiration_date"})

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    location: str | None = Field(None, max_length=255)
    expiration_date: UtcDatetime | None = None
    category_id: int | None = None


class WarrantyResponse(ApiModel):
    id: int
    title: str
    description: str | None
    location: str | None
    expiration_date: datetime
    category_id: int | None
    created_at: datetime

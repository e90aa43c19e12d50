"""Pydantic DTOs for the Note feature."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from .common import ApiModel, PartialUpdate


class NoteCreate(ApiModel):
    """Schema for creating a new note."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Water heater flush"])
    content: str = Field(..., min_length=1, examples=["Drained 2 gallons, sediment was light."])
    category_id: int | None = None


class NoteUpdate(PartialUpdate):
    """Schema for updating an existing note: all fields optional."""

    required_fields: ClassVar[frozenset[str]] = frozenset({"title", "content"})

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=1)
    category_id: int | None = None


class NoteResponse(ApiModel):
    id: int
    title: str
    content: str
    category_id: int | None
    created_at: datetime

"""Pydantic DTOs for the Photo feature.

Photos are created from multipart form fields (see the photos endpoint), so
there is no JSON create schema; only metadata can be updated afterwards.
"""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from .common import ApiModel, PartialUpdate


class PhotoUpdate(PartialUpdate):
    """Editable photo metadata. The stored file itself is immutable."""

    required_fields: ClassVar[frozenset[str]] = frozenset({"title"})

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    category_id: int | None = None


class PhotoResponse(ApiModel):
    id: int
    title: str
    description: str | None
    file_path: str
    content_type: str
    category_id: int | None
    created_at: datetime

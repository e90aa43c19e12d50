"""Pydantic DTOs for the Category feature."""

from typing import ClassVar

from pydantic import Field

from .common import ApiModel, PartialUpdate

_HEX_COLOR = r"^#(?:[0-9a-fA-F]{3}){1,2}$"


class CategoryCreate(ApiModel):
    """Schema for creating a new category."""

    name: str = Field(..., min_length=1, max_length=100, examples=["Plumbing"])
    color: str = Field(..., pattern=_HEX_COLOR, examples=["#3b82f6"])


class CategoryUpdate(PartialUpdate):
    """Schema for updating an existing category: all fields optional."""

    required_fields: ClassVar[frozenset[str]] = frozenset({"name", "color"})

    name: str | None = Field(None, min_length=1, max_length=100)
    color: str | None = Field(None, pattern=_HEX_COLOR)


class CategoryResponse(ApiModel):
    id: int
    name: str
    color: str

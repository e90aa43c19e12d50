"""Shared pieces for the API DTOs.

The wire format is camelCase (``categoryId``, ``createdAt``) to match the
browser client; snake_case keys are accepted on input too.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar

from pydantic import AfterValidator, BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


def as_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class ApiModel(BaseModel):
    """Base DTO: camelCase aliases, readable from domain dataclasses."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PartialUpdate(ApiModel):
    """Base for PUT payloads: only the fields present in the request are applied.

    Fields listed in ``required_fields`` may be omitted but not sent as null.
    """

    required_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_required(self) -> "PartialUpdate":
        nulls = sorted(
            name
            for name in self.required_fields
            if name in self.model_fields_set and getattr(self, name) is None
        )
        if nulls:
            raise ValueError(f"{', '.join(nulls)} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Supplied fields keyed by attribute name, ready for a shallow merge."""
        return self.model_dump(exclude_unset=True)

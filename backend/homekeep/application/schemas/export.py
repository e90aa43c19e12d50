"""Pydantic DTO for the full data export document."""

from datetime import datetime

from .category import CategoryResponse
from .common import ApiModel
from .maintenance_event import MaintenanceEventResponse
from .note import NoteResponse
from .photo import PhotoResponse
from .warranty import WarrantyResponse


class ExportDocument(ApiModel):
    """Every collection as a plain list, in insertion order."""

    exported_at: datetime
    categories: list[CategoryResponse]
    photos: list[PhotoResponse]
    notes: list[NoteResponse]
    warranties: list[WarrantyResponse]
    maintenance_events: list[MaintenanceEventResponse]

"""Pydantic DTO for the dashboard summary cards."""

from datetime import datetime

from .common import ApiModel


class DashboardSummary(ApiModel):
    total_records: int
    upcoming_expirations: int
    photos_stored: int
    maintenance_notes: int
    maintenance_events: int
    categories: int
    last_note_date: datetime | None = None

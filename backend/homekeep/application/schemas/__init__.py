from .category import CategoryCreate, CategoryResponse, CategoryUpdate
from .common import ApiModel, PartialUpdate, UtcDatetime, as_utc
from .dashboard import DashboardSummary
from .export import ExportDocument
from .maintenance_event import (
    MaintenanceEventCreate,
    MaintenanceEventResponse,
    MaintenanceEventUpdate,
)
from .note import NoteCreate, NoteResponse, NoteUpdate
from .photo import PhotoResponse, PhotoUpdate
from .user import UserCreate, UserResponse
from .warranty import WarrantyCreate, WarrantyResponse, WarrantyUpdate

__all__ = [
    "ApiModel",
    "CategoryCreate",
    "CategoryResponse",
    "CategoryUpdate",
    "DashboardSummary",
    "ExportDocument",
    "MaintenanceEventCreate",
    "MaintenanceEventResponse",
    "MaintenanceEventUpdate",
    "NoteCreate",
    "NoteResponse",
    "NoteUpdate",
    "PartialUpdate",
    "PhotoResponse",
    "PhotoUpdate",
    "UserCreate",
    "UserResponse",
    "UtcDatetime",
    "WarrantyCreate",
    "WarrantyResponse",
    "WarrantyUpdate",
    "as_utc",
]

from .category_service import CategoryService, DEFAULT_CATEGORIES
from .dashboard_service import DashboardService
from .export_service import ExportService
from .maintenance_event_service import MaintenanceEventService
from .note_service import NoteService
from .photo_service import PhotoService
from .reference_guard import ReferenceGuard
from .user_service import UserService
from .warranty_service import WarrantyService

__all__ = [
    "CategoryService",
    "DEFAULT_CATEGORIES",
    "DashboardService",
    "ExportService",
    "MaintenanceEventService",
    "NoteService",
    "PhotoService",
    "ReferenceGuard",
    "UserService",
    "WarrantyService",
]

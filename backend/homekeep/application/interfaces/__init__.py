from .entity_repository import CategorizedRepository, EntityRepository
from .category_repository import CategoryRepository
from .file_storage import FileStorage
from .maintenance_event_repository import MaintenanceEventRepository
from .note_repository import NoteRepository
from .photo_repository import PhotoRepository
from .user_repository import UserRepository
from .warranty_repository import WarrantyRepository

__all__ = [
    "CategorizedRepository",
    "CategoryRepository",
    "EntityRepository",
    "FileStorage",
    "MaintenanceEventRepository",
    "NoteRepository",
    "PhotoRepository",
    "UserRepository",
    "WarrantyRepository",
]

from .category import CategoryModel
from .maintenance_event import MaintenanceEventModel
from .note import NoteModel
from .photo import PhotoModel
from .user import UserModel
from .warranty import WarrantyModel

__all__ = [
    "CategoryModel",
    "MaintenanceEventModel",
    "NoteModel",
    "PhotoModel",
    "UserModel",
    "WarrantyModel",
]

from .category import Category
from .maintenance_event import MaintenanceEvent
from .note import Note
from .photo import Photo
from .user import User
from .warranty import Warranty

__all__ = [
    "Category",
    "MaintenanceEvent",
    "Note",
    "Photo",
    "User",
    "Warranty",
]

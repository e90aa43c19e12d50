from .records import (
    SQLAlchemyCategoryRepository,
    SQLAlchemyMaintenanceEventRepository,
    SQLAlchemyNoteRepository,
    SQLAlchemyPhotoRepository,
    SQLAlchemyWarrantyRepository,
)
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyCategoryRepository",
    "SQLAlchemyMaintenanceEventRepository",
    "SQLAlchemyNoteRepository",
    "SQLAlchemyPhotoRepository",
    "SQLAlchemyUserRepository",
    "SQLAlchemyWarrantyRepository",
]

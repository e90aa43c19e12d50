from .repositories import (
    InMemoryCategoryRepository,
    InMemoryMaintenanceEventRepository,
    InMemoryNoteRepository,
    InMemoryPhotoRepository,
    InMemoryUserRepository,
    InMemoryWarrantyRepository,
)
from .store import InMemoryStore

__all__ = [
    "InMemoryCategoryRepository",
    "InMemoryMaintenanceEventRepository",
    "InMemoryNoteRepository",
    "InMemoryPhotoRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
    "InMemoryWarrantyRepository",
]

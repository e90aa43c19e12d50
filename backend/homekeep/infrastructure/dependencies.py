"""FastAPI dependency injection: wires infrastructure to application layer.

Every request gets one ``Repositories`` bundle: SQLAlchemy repositories
sharing a single session when ``DATABASE_URL`` is set, otherwise views over
the process-wide in-memory store.
"""

from collections.abc import AsyncGenerator
from dataclasses import dataclass
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from homekeep.config import Settings, get_settings
from homekeep.application.interfaces import (
    CategorizedRepository,
    CategoryRepository,
    FileStorage,
    MaintenanceEventRepository,
    NoteRepository,
    PhotoRepository,
    UserRepository,
    WarrantyRepository,
)
from homekeep.application.services import (
    CategoryService,
    DashboardService,
    ExportService,
    MaintenanceEventService,
    NoteService,
    PhotoService,
    ReferenceGuard,
    UserService,
    WarrantyService,
)
from homekeep.infrastructure.database.repositories import (
    SQLAlchemyCategoryRepository,
    SQLAlchemyMaintenanceEventRepository,
    SQLAlchemyNoteRepository,
    SQLAlchemyPhotoRepository,
    SQLAlchemyUserRepository,
    SQLAlchemyWarrantyRepository,
)
from homekeep.infrastructure.database.session import session_scope
from homekeep.infrastructure.memory import (
    InMemoryCategoryRepository,
    InMemoryMaintenanceEventRepository,
    InMemoryNoteRepository,
    InMemoryPhotoRepository,
    InMemoryStore,
    InMemoryUserRepository,
    InMemoryWarrantyRepository,
)
from homekeep.infrastructure.storage.local_file_storage import LocalFileStorage


@dataclass
class Repositories:
    categories: CategoryRepository
    photos: PhotoRepository
    notes: NoteRepository
    warranties: WarrantyRepository
    events: MaintenanceEventRepository
    users: UserRepository

    @classmethod
    def in_memory(cls, store: InMemoryStore) -> "Repositories":
        return cls(
            categories=InMemoryCategoryRepository(store),
            photos=InMemoryPhotoRepository(store),
            notes=InMemoryNoteRepository(store),
            warranties=InMemoryWarrantyRepository(store),
            events=InMemoryMaintenanceEventRepository(store),
            users=InMemoryUserRepository(store),
        )

    @classmethod
    def sqlalchemy(cls, session: AsyncSession) -> "Repositories":
        return cls(
            categories=SQLAlchemyCategoryRepository(session),
            photos=SQLAlchemyPhotoRepository(session),
            notes=SQLAlchemyNoteRepository(session),
            warranties=SQLAlchemyWarrantyRepository(session),
            events=SQLAlchemyMaintenanceEventRepository(session),
            users=SQLAlchemyUserRepository(session),
        )

    def dependents_of_category(self) -> dict[str, CategorizedRepository]:
        return {
            "photos": self.photos,
            "notes": self.notes,
            "warranties": self.warranties,
            "maintenance events": self.events,
        }

    def reference_guard(self) -> ReferenceGuard:
        return ReferenceGuard(self.categories, self.photos)


@lru_cache
def get_memory_store() -> InMemoryStore:
    """Process-wide store used when no database is configured."""
    return InMemoryStore()


async def get_repositories(
    settings: Settings = Depends(get_settings),
    store: InMemoryStore = Depends(get_memory_store),
) -> AsyncGenerator[Repositories, None]:
    """Provides the repository bundle for one request (one transaction with SQL)."""
    if settings.uses_database:
        async with session_scope(settings.database_url) as session:
            yield Repositories.sqlalchemy(session)
    else:
        yield Repositories.in_memory(store)


def get_file_storage(settings: Settings = Depends(get_settings)) -> FileStorage:
    return LocalFileStorage(upload_dir=settings.upload_dir)


async def get_category_service(
    repos: Repositories = Depends(get_repositories),
) -> AsyncGenerator[CategoryService, None]:
    """Provides a CategoryService that refuses to delete referenced categories."""
    yield CategoryService(repos.categories, repos.dependents_of_category())


async def get_photo_service(
    repos: Repositories = Depends(get_repositories),
    storage: FileStorage = Depends(get_file_storage),
) -> AsyncGenerator[PhotoService, None]:
    """Provides a PhotoService with file storage and event detachment wired up."""
    yield PhotoService(repos.photos, storage, repos.reference_guard(), events=repos.events)


async def get_note_service(
    repos: Repositories = Depends(get_repositories),
) -> AsyncGenerator[NoteService, None]:
    yield NoteService(repos.notes, repos.reference_guard())


async def get_warranty_service(
    repos: Repositories = Depends(get_repositories),
) -> AsyncGenerator[WarrantyService, None]:
    yield WarrantyService(repos.warranties, repos.reference_guard())


async def get_maintenance_event_service(
    repos: Repositories = Depends(get_repositories),
) -> AsyncGenerator[MaintenanceEventService, None]:
    yield MaintenanceEventService(repos.events, repos.reference_guard())


async def get_dashboard_service(
    repos: Repositories = Depends(get_repositories),
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[DashboardService, None]:
    yield DashboardService(
        categories=repos.categories,
        photos=repos.photos,
        notes=repos.notes,
        warranties=repos.warranties,
        events=repos.events,
        upcoming_window_days=settings.upcoming_window_days,
    )


async def get_export_service(
    repos: Repositories = Depends(get_repositories),
) -> AsyncGenerator[ExportService, None]:
    yield ExportService(
        categories=repos.categories,
        photos=repos.photos,
        notes=repos.notes,
        warranties=repos.warranties,
        events=repos.events,
    )


async def get_user_service(
    repos: Repositories = Depends(get_repositories),
) -> AsyncGenerator[UserService, None]:
    yield UserService(repos.users)

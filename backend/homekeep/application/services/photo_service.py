"""Photo service: photo metadata plus the binary content behind it."""

import logging
from pathlib import Path

from homekeep.application.interfaces import (
    FileStorage,
    MaintenanceEventRepository,
    PhotoRepository,
)
from homekeep.application.schemas import PhotoUpdate
from homekeep.domain.entities import Photo
from homekeep.domain.exceptions import EntityNotFoundError, FileStorageError

from .reference_guard import ReferenceGuard

logger = logging.getLogger(__name__)


class PhotoService:
    """Application service for photos.

    Upload order: metadata record first (to obtain the id the file is named
    after), then the bytes, then the record is pointed at the stored name.
    A failed write removes the half-created record again.
    """

    def __init__(
        self,
        repository: PhotoRepository,
        file_storage: FileStorage,
        guard: ReferenceGuard,
        events: MaintenanceEventRepository | None = None,
    ):
        self._repository = repository
        self._storage = file_storage
        self._guard = guard
        self._events = events

    # ── Queries ──────────────────────────────────────────────────────

    async def get_photo(self, photo_id: int) -> Photo:
        photo = await self._repository.get_by_id(photo_id)
        if photo is None:
            raise EntityNotFoundError("Photo", photo_id)
        return photo

    async def list_photos(self, category_id: int | None = None) -> list[Photo]:
        if category_id is not None:
            return await self._repository.get_by_category(category_id)
        return await self._repository.get_all()

    async def list_recent(self, limit: int) -> list[Photo]:
        return await self._repository.get_recent(limit)

    async def get_photo_file(self, photo_id: int) -> tuple[bytes, str]:
        """Return ``(content, content_type)`` for a photo.

        Raises EntityNotFoundError both for an unknown id and for a record
        whose file can no longer be read.
        """
        photo = await self.get_photo(photo_id)
        content = await self._storage.read(photo.file_path)
        if content is None:
            logger.error("Photo %d has no readable file (%s)", photo_id, photo.file_path)
            raise EntityNotFoundError("PhotoFile", photo_id)
        return content, photo.content_type

    # ── Commands ─────────────────────────────────────────────────────

    async def upload_photo(
        self,
        *,
        title: str,
        filename: str,
        content_type: str,
        content: bytes,
        description: str | None = None,
        category_id: int | None = None,
    ) -> Photo:
        await self._guard.ensure_category(category_id)

        photo = await self._repository.create(
            Photo(
                title=title,
                description=description,
                file_path=filename,
                content_type=content_type,
                category_id=category_id,
            )
        )
        try:
            stored_name = await self._storage.save(
                photo.id, Path(filename).suffix, content
            )
        except FileStorageError:
            await self._repository.delete(photo.id)
            raise

        stored = await self._repository.update(photo.id, {"file_path": stored_name})
        logger.info("Photo %d uploaded as %s (%d bytes)", photo.id, stored_name, len(content))
        return stored

    async def update_photo(self, photo_id: int, data: PhotoUpdate) -> Photo:
        await self.get_photo(photo_id)
        changes = data.changes()
        await self._guard.ensure_category(changes.get("category_id"))
        photo = await self._repository.update(photo_id, changes)
        if photo is None:
            raise EntityNotFoundError("Photo", photo_id)
        return photo

    async def delete_photo(self, photo_id: int) -> bool:
        """Delete the record, detach it from events, then drop the file (best effort)."""
        photo = await self.get_photo(photo_id)
        if not await self._repository.delete(photo_id):
            raise EntityNotFoundError("Photo", photo_id)

        if self._events is not None:
            await self._detach_from_events(photo_id)

        if not await self._storage.remove(photo.file_path):
            logger.warning("Photo %d deleted but file %s was not removed", photo_id, photo.file_path)
        return True

    async def _detach_from_events(self, photo_id: int) -> None:
        for event in await self._events.get_referencing_photo(photo_id):
            await self._events.update(
                event.id,
                {
                    "photo_ids": _without(event.photo_ids, photo_id),
                    "receipt_photo_ids": _without(event.receipt_photo_ids, photo_id),
                },
            )
            logger.debug("Removed photo %d from maintenance event %d", photo_id, event.id)


def _without(ids: list[int] | None, photo_id: int) -> list[int] | None:
    if ids is None:
        return None
    return [i for i in ids if i != photo_id]

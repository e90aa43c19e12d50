"""Write-time validation of cross-entity references."""

from homekeep.application.interfaces import CategoryRepository, PhotoRepository
from homekeep.domain.exceptions import InvalidReferenceError


class ReferenceGuard:
    """Checks that ``categoryId`` / photo id lists point at existing records."""

    def __init__(
        self,
        categories: CategoryRepository,
        photos: PhotoRepository | None = None,
    ):
        self._categories = categories
        self._photos = photos

    async def ensure_category(self, category_id: int | None) -> None:
        if category_id is None:
            return
        if await self._categories.get_by_id(category_id) is None:
            raise InvalidReferenceError("Category", "categoryId", category_id)

    async def ensure_photos(self, field: str, photo_ids: list[int] | None) -> None:
        if not photo_ids or self._photos is None:
            return
        for photo_id in photo_ids:
            if await self._photos.get_by_id(photo_id) is None:
                raise InvalidReferenceError("Photo", field, photo_id)

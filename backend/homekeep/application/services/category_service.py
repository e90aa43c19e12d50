"""Application service (use case) for Category operations."""

import logging

from homekeep.application.interfaces import CategorizedRepository, CategoryRepository
from homekeep.application.schemas import CategoryCreate, CategoryUpdate
from homekeep.domain.entities import Category
from homekeep.domain.exceptions import EntityInUseError, EntityNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("Plumbing", "#3b82f6"),
    ("Electrical", "#10b981"),
    ("HVAC", "#f59e0b"),
    ("Appliances", "#8b5cf6"),
    ("Garden", "#ec4899"),
)


class CategoryService:
    """Orchestrates category CRUD logic.

    ``dependents`` maps a human-readable collection name ("notes", "photos",
    ...) to the repository holding records that may reference a category.
    A category is only deleted when none of them do.
    """

    def __init__(
        self,
        repository: CategoryRepository,
        dependents: dict[str, CategorizedRepository] | None = None,
    ):
        self._repository = repository
        self._dependents = dependents or {}

    async def get_category(self, category_id: int) -> Category:
        category = await self._repository.get_by_id(category_id)
        if category is None:
            raise EntityNotFoundError("Category", category_id)
        return category

    async def list_categories(self) -> list[Category]:
        return await self._repository.get_all()

    async def create_category(self, data: CategoryCreate) -> Category:
        return await self._repository.create(Category(name=data.name, color=data.color))

    async def update_category(self, category_id: int, data: CategoryUpdate) -> Category:
        category = await self._repository.update(category_id, data.changes())
        if category is None:
            raise EntityNotFoundError("Category", category_id)
        return category

    async def delete_category(self, category_id: int) -> bool:
        await self.get_category(category_id)

        references: dict[str, int] = {}
        for name, repository in self._dependents.items():
            count = len(await repository.get_by_category(category_id))
            if count:
                references[name] = count
        if references:
            raise EntityInUseError("Category", category_id, references)

        return await self._repository.delete(category_id)

    async def seed_defaults(self) -> int:
        """Create the default categories when none exist. Returns how many were created."""
        if await self._repository.count():
            return 0
        for name, color in DEFAULT_CATEGORIES:
            await self._repository.create(Category(name=name, color=color))
        logger.info("Seeded %d default categories", len(DEFAULT_CATEGORIES))
        return len(DEFAULT_CATEGORIES)

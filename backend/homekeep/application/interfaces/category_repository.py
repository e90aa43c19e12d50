"""Abstract repository interface (port) for categories."""

from homekeep.domain.entities import Category

from .entity_repository import EntityRepository


class CategoryRepository(EntityRepository[Category]):
    """Port for category persistence: implemented in the infrastructure layer."""

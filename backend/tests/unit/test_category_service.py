"""Unit tests for the CategoryService."""

import pytest

from homekeep.application.schemas import CategoryCreate, CategoryUpdate, NoteCreate
from homekeep.application.services import (
    DEFAULT_CATEGORIES,
    CategoryService,
    NoteService,
    ReferenceGuard,
)
from homekeep.domain.exceptions import EntityInUseError, EntityNotFoundError
from homekeep.infrastructure.memory import (
    InMemoryCategoryRepository,
    InMemoryNoteRepository,
    InMemoryStore,
)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def service(store: InMemoryStore) -> CategoryService:
    return CategoryService(
        InMemoryCategoryRepository(store),
        {"notes": InMemoryNoteRepository(store)},
    )


@pytest.mark.asyncio
async def test_create_and_get_category(service: CategoryService):
    created = await service.create_category(CategoryCreate(name="Plumbing", color="#3b82f6"))
    fetched = await service.get_category(created.id)
    assert fetched.name == "Plumbing"
    assert fetched.color == "#3b82f6"


@pytest.mark.asyncio
async def test_get_category_not_found(service: CategoryService):
    with pytest.raises(EntityNotFoundError):
        await service.get_category(999)


@pytest.mark.asyncio
async def test_update_category_keeps_unsent_fields(service: CategoryService):
    created = await service.create_category(CategoryCreate(name="Garden", color="#ec4899"))
    updated = await service.update_category(created.id, CategoryUpdate(name="Yard"))
    assert updated.name == "Yard"
    assert updated.color == "#ec4899"


@pytest.mark.asyncio
async def test_update_missing_category_raises(service: CategoryService):
    with pytest.raises(EntityNotFoundError):
        await service.update_category(5, CategoryUpdate(name="x"))


@pytest.mark.asyncio
async def test_delete_unreferenced_category(service: CategoryService):
    created = await service.create_category(CategoryCreate(name="HVAC", color="#f59e0b"))
    assert await service.delete_category(created.id) is True
    with pytest.raises(EntityNotFoundError):
        await service.get_category(created.id)


@pytest.mark.asyncio
async def test_delete_referenced_category_is_refused(
    service: CategoryService, store: InMemoryStore
):
    category = await service.create_category(CategoryCreate(name="HVAC", color="#f59e0b"))
    categories = InMemoryCategoryRepository(store)
    notes = NoteService(InMemoryNoteRepository(store), ReferenceGuard(categories))
    await notes.create_note(NoteCreate(title="Filter", content="Changed", category_id=category.id))

    with pytest.raises(EntityInUseError) as exc_info:
        await service.delete_category(category.id)

    assert exc_info.value.references == {"notes": 1}
    assert (await service.get_category(category.id)).name == "HVAC"


@pytest.mark.asyncio
async def test_seed_defaults_only_into_empty_table(service: CategoryService):
    assert await service.seed_defaults() == len(DEFAULT_CATEGORIES)
    assert await service.seed_defaults() == 0

    names = [c.name for c in await service.list_categories()]
    assert names == ["Plumbing", "Electrical", "HVAC", "Appliances", "Garden"]

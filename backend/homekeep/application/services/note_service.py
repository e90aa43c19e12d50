"""Application service (use case) for Note operations."""

from homekeep.application.interfaces import NoteRepository
from homekeep.application.schemas import NoteCreate, NoteUpdate
from homekeep.domain.entities import Note
from homekeep.domain.exceptions import EntityNotFoundError

from .reference_guard import ReferenceGuard


class NoteService:
    """Orchestrates note business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: NoteRepository, guard: ReferenceGuard):
        self._repository = repository
        self._guard = guard

    async def get_note(self, note_id: int) -> Note:
        note = await self._repository.get_by_id(note_id)
        if note is None:
            raise EntityNotFoundError("Note", note_id)
        return note

    async def list_notes(self, category_id: int | None = None) -> list[Note]:
        if category_id is not None:
            return await self._repository.get_by_category(category_id)
        return await self._repository.get_all()

    async def list_recent(self, limit: int) -> list[Note]:
        return await self._repository.get_recent(limit)

    async def create_note(self, data: NoteCreate) -> Note:
        await self._guard.ensure_category(data.category_id)
        note = Note(title=data.title, content=data.content, category_id=data.category_id)
        return await self._repository.create(note)

    async def update_note(self, note_id: int, data: NoteUpdate) -> Note:
        await self.get_note(note_id)
        changes = data.changes()
        await self._guard.ensure_category(changes.get("category_id"))
        note = await self._repository.update(note_id, changes)
        if note is None:
            raise EntityNotFoundError("Note", note_id)
        return note

    async def delete_note(self, note_id: int) -> bool:
        if not await self._repository.delete(note_id):
            raise EntityNotFoundError("Note", note_id)
        return True

"""Maintenance note endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from homekeep.application.schemas import NoteCreate, NoteResponse, NoteUpdate
from homekeep.application.services import NoteService
from homekeep.config import Settings, get_settings
from homekeep.domain.exceptions import EntityNotFoundError, InvalidReferenceError
from homekeep.infrastructure.dependencies import get_note_service

router = APIRouter(prefix="/notes", tags=["Notes"])


@router.get("", response_model=list[NoteResponse])
async def list_notes(
    category_id: int | None = Query(None, alias="categoryId"),
    service: NoteService = Depends(get_note_service),
) -> list[NoteResponse]:
    notes = await service.list_notes(category_id)
    return [NoteResponse.model_validate(n) for n in notes]


@router.get("/recent", response_model=list[NoteResponse])
async def list_recent_notes(
    limit: int | None = Query(None, ge=0, le=100),
    settings: Settings = Depends(get_settings),
    service: NoteService = Depends(get_note_service),
) -> list[NoteResponse]:
    """Newest notes first."""
    notes = await service.list_recent(settings.recent_limit if limit is None else limit)
    return [NoteResponse.model_validate(n) for n in notes]


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: int,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    try:
        note = await service.get_note(note_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return NoteResponse.model_validate(note)


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    data: NoteCreate,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    try:
        note = await service.create_note(data)
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return NoteResponse.model_validate(note)


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: int,
    data: NoteUpdate,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    try:
        note = await service.update_note(note_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return NoteResponse.model_validate(note)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: int,
    service: NoteService = Depends(get_note_service),
) -> None:
    try:
        await service.delete_note(note_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

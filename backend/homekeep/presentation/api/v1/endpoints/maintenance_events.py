"""Maintenance event endpoints, including the timeline view."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from homekeep.application.schemas import (
    MaintenanceEventCreate,
    MaintenanceEventResponse,
    MaintenanceEventUpdate,
)
from homekeep.application.services import MaintenanceEventService
from homekeep.config import Settings, get_settings
from homekeep.domain.exceptions import EntityNotFoundError, InvalidReferenceError
from homekeep.infrastructure.dependencies import get_maintenance_event_service

router = APIRouter(prefix="/maintenance-events", tags=["Maintenance Events"])


@router.get("", response_model=list[MaintenanceEventResponse])
async def list_events(
    category_id: int | None = Query(None, alias="categoryId"),
    service: MaintenanceEventService = Depends(get_maintenance_event_service),
) -> list[MaintenanceEventResponse]:
    events = await service.list_events(category_id)
    return [MaintenanceEventResponse.model_validate(e) for e in events]


@router.get("/recent", response_model=list[MaintenanceEventResponse])
async def list_recent_events(
    limit: int | None = Query(None, ge=0, le=100),
    settings: Settings = Depends(get_settings),
    service: MaintenanceEventService = Depends(get_maintenance_event_service),
) -> list[MaintenanceEventResponse]:
    """Most recently recorded events first."""
    events = await service.list_recent(settings.recent_limit if limit is None else limit)
    return [MaintenanceEventResponse.model_validate(e) for e in events]


@router.get("/timeline", response_model=list[MaintenanceEventResponse])
async def list_timeline(
    limit: int | None = Query(None, ge=0),
    service: MaintenanceEventService = Depends(get_maintenance_event_service),
) -> list[MaintenanceEventResponse]:
    """Events ordered by the date the work happened, latest first."""
    events = await service.list_timeline(limit)
    return [MaintenanceEventResponse.model_validate(e) for e in events]


@router.get("/{event_id}", response_model=MaintenanceEventResponse)
async def get_event(
    event_id: int,
    service: MaintenanceEventService = Depends(get_maintenance_event_service),
) -> MaintenanceEventResponse:
    try:
        event = await service.get_event(event_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MaintenanceEventResponse.model_validate(event)


@router.post(
    "",
    response_model=MaintenanceEventResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_event(
    data: MaintenanceEventCreate,
    service: MaintenanceEventService = Depends(get_maintenance_event_service),
) -> MaintenanceEventResponse:
    try:
        event = await service.create_event(data)
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return MaintenanceEventResponse.model_validate(event)


@router.put("/{event_id}", response_model=MaintenanceEventResponse)
async def update_event(
    event_id: int,
    data: MaintenanceEventUpdate,
    service: MaintenanceEventService = Depends(get_maintenance_event_service),
) -> MaintenanceEventResponse:
    try:
        event = await service.update_event(event_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return MaintenanceEventResponse.model_validate(event)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: int,
    service: MaintenanceEventService = Depends(get_maintenance_event_service),
) -> None:
    try:
        await service.delete_event(event_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

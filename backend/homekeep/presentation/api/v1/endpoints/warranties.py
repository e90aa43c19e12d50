"""Warranty and expiration endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from homekeep.application.schemas import WarrantyCreate, WarrantyResponse, WarrantyUpdate
from homekeep.application.services import WarrantyService
from homekeep.domain.exceptions import EntityNotFoundError, InvalidReferenceError
from homekeep.infrastructure.dependencies import get_warranty_service

router = APIRouter(prefix="/warranties", tags=["Warranties"])


@router.get("", response_model=list[WarrantyResponse])
async def list_warranties(
    category_id: int | None = Query(None, alias="categoryId"),
    service: WarrantyService = Depends(get_warranty_service),
) -> list[WarrantyResponse]:
    warranties = await service.list_warranties(category_id)
    return [WarrantyResponse.model_validate(w) for w in warranties]


@router.get("/upcoming", response_model=list[WarrantyResponse])
async def list_upcoming_warranties(
    days: int = Query(30, ge=0, le=3650),
    service: WarrantyService = Depends(get_warranty_service),
) -> list[WarrantyResponse]:
    """Warranties expiring between now and ``days`` from now, soonest first."""
    warranties = await service.list_upcoming(days)
    return [WarrantyResponse.model_validate(w) for w in warranties]


@router.get("/{warranty_id}", response_model=WarrantyResponse)
async def get_warranty(
    warranty_id: int,
    service: WarrantyService = Depends(get_warranty_service),
) -> WarrantyResponse:
    try:
        warranty = await service.get_warranty(warranty_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return WarrantyResponse.model_validate(warranty)


@router.post("", response_model=WarrantyResponse, status_code=status.HTTP_201_CREATED)
async def create_warranty(
    data: WarrantyCreate,
    service: WarrantyService = Depends(get_warranty_service),
) -> WarrantyResponse:
    try:
        warranty = await service.create_warranty(data)
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return WarrantyResponse.model_validate(warranty)


@router.put("/{warranty_id}", response_model=WarrantyResponse)
async def update_warranty(
    warranty_id: int,
    data: WarrantyUpdate,
    service: WarrantyService = Depends(get_warranty_service),
) -> WarrantyResponse:
    try:
        warranty = await service.update_warranty(warranty_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return WarrantyResponse.model_validate(warranty)


@router.delete("/{warranty_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_warranty(
    warranty_id: int,
    service: WarrantyService = Depends(get_warranty_service),
) -> None:
    try:
        await service.delete_warranty(warranty_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

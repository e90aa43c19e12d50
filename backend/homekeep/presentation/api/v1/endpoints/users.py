"""User registration and lookup endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from homekeep.application.schemas import UserCreate, UserResponse
from homekeep.application.services import UserService
from homekeep.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from homekeep.infrastructure.dependencies import get_user_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    data: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    try:
        user = await service.register(data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    try:
        user = await service.get_user(user_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return UserResponse.model_validate(user)

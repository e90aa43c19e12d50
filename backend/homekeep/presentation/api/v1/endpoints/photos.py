"""Photo endpoints: multipart upload, metadata CRUD and raw file download."""

import mimetypes

from fastapi import (
    APIRouter,
    Depends,
    File,
    Form,
    HTTPException,
    Query,
    Response,
    UploadFile,
    status,
)

from homekeep.application.schemas import PhotoResponse, PhotoUpdate
from homekeep.application.services import PhotoService
from homekeep.config import Settings, get_settings
from homekeep.domain.exceptions import EntityNotFoundError, InvalidReferenceError
from homekeep.infrastructure.dependencies import get_photo_service

router = APIRouter(prefix="/photos", tags=["Photos"])

_FALLBACK_CONTENT_TYPE = "application/octet-stream"


def _content_type_of(upload: UploadFile) -> str:
    if upload.content_type and upload.content_type != _FALLBACK_CONTENT_TYPE:
        return upload.content_type
    guessed, _ = mimetypes.guess_type(upload.filename or "")
    return guessed or _FALLBACK_CONTENT_TYPE


@router.get("", response_model=list[PhotoResponse])
async def list_photos(
    category_id: int | None = Query(None, alias="categoryId"),
    service: PhotoService = Depends(get_photo_service),
) -> list[PhotoResponse]:
    photos = await service.list_photos(category_id)
    return [PhotoResponse.model_validate(p) for p in photos]


@router.get("/recent", response_model=list[PhotoResponse])
async def list_recent_photos(
    limit: int | None = Query(None, ge=0, le=100),
    settings: Settings = Depends(get_settings),
    service: PhotoService = Depends(get_photo_service),
) -> list[PhotoResponse]:
    photos = await service.list_recent(settings.recent_limit if limit is None else limit)
    return [PhotoResponse.model_validate(p) for p in photos]


@router.post("", response_model=PhotoResponse, status_code=status.HTTP_201_CREATED)
async def upload_photo(
    file: UploadFile = File(...),
    title: str = Form(..., min_length=1, max_length=255),
    description: str | None = Form(None),
    category_id: int | None = Form(None, alias="categoryId"),
    settings: Settings = Depends(get_settings),
    service: PhotoService = Depends(get_photo_service),
) -> PhotoResponse:
    """Upload one photo with its metadata."""
    limit = settings.max_upload_size_bytes
    if file.size is not None and file.size > limit:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File exceeds the {settings.max_upload_size_mb} MB upload limit",
        )

    content = await file.read()
    if len(content) > limit:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File exceeds the {settings.max_upload_size_mb} MB upload limit",
        )
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")

    try:
        photo = await service.upload_photo(
            title=title,
            description=description,
            category_id=category_id,
            filename=file.filename or "photo",
            content_type=_content_type_of(file),
            content=content,
        )
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return PhotoResponse.model_validate(photo)


@router.get("/{photo_id}", response_model=PhotoResponse)
async def get_photo(
    photo_id: int,
    service: PhotoService = Depends(get_photo_service),
) -> PhotoResponse:
    try:
        photo = await service.get_photo(photo_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return PhotoResponse.model_validate(photo)


@router.get("/{photo_id}/file")
async def get_photo_file(
    photo_id: int,
    service: PhotoService = Depends(get_photo_service),
) -> Response:
    """Serve the stored bytes with the content type recorded at upload.

    Anything that is not an image is sent as a download, never rendered inline.
    """
    try:
        content, content_type = await service.get_photo_file(photo_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    headers = {"X-Content-Type-Options": "nosniff"}
    if not content_type.startswith("image/"):
        headers["Content-Disposition"] = "attachment"
    return Response(content=content, media_type=content_type, headers=headers)



@router.put("/{photo_id}", response_model=PhotoResponse)
async def update_photo(
    photo_id: int,
    data: PhotoUpdate,
    service: PhotoService = Depends(get_photo_service),
) -> PhotoResponse:
    try:
        photo = await service.update_photo(photo_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return PhotoResponse.model_validate(photo)


@router.delete("/{photo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_photo(
    photo_id: int,
    service: PhotoService = Depends(get_photo_service),
) -> None:
    """Delete the photo record and its file; events referencing it are updated."""
    try:
        await service.delete_photo(photo_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

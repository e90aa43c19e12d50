"""Full data export, downloaded as a dated JSON attachment."""

from fastapi import APIRouter, Depends, Response

from homekeep.application.schemas import ExportDocument
from homekeep.application.services import ExportService
from homekeep.infrastructure.dependencies import get_export_service

router = APIRouter(prefix="/export", tags=["Export"])


@router.get("", response_class=Response)
async def export_data(
    service: ExportService = Depends(get_export_service),
) -> Response:
    document = ExportDocument.model_validate(await service.export(), from_attributes=True)
    filename = f"homekeep-export-{document.exported_at:%Y-%m-%d}.json"
    return Response(
        content=document.model_dump_json(by_alias=True, indent=2),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

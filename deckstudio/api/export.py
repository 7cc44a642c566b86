"""
Presentation export download.

Mounted outside the versioned API at ``/presentation/{id}/export``.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import FileResponse
from starlette.background import BackgroundTask

from deckstudio.api.dependencies import (
    get_deck_writer,
    get_file_store,
    get_policy,
    get_presentation_builder,
    get_requester_id,
    get_unit_of_work,
)
from deckstudio.api.errors import status_for_code
from deckstudio.application.ports import AccessPolicy, DeckWriterPort
from deckstudio.application.services.presentation_builder import PresentationBuilder
from deckstudio.application.unit_of_work import UnitOfWork
from deckstudio.application.use_cases import ExportPresentationUseCase
from deckstudio.domain.validators.template_validators import PPTX_MIME_TYPE
from deckstudio.infra.config.logging_config import bind_context, get_logger
from deckstudio.infra.storage.local_file_store import LocalFileStore

router = APIRouter(tags=["export"])
log = get_logger("api.export")

EXPORT_FILENAME = "presentation.pptx"


@router.get("/presentation/{presentation_id}/export")
async def export_presentation(
    presentation_id: str,
    requester_id: Optional[str] = Depends(get_requester_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    builder: PresentationBuilder = Depends(get_presentation_builder),
    writer: DeckWriterPort = Depends(get_deck_writer),
    file_store: LocalFileStore = Depends(get_file_store),
    policy: AccessPolicy = Depends(get_policy),
) -> FileResponse:
    """Render the stored presentation and stream it; the file is removed afterwards."""
    bind_context(presentation_id=presentation_id)
    use_case = ExportPresentationUseCase(
        uow=uow,
        builder=builder,
        writer=writer,
        file_store=file_store,
        access_policy=policy,
    )
    result = await use_case.execute(presentation_id, requester_id=requester_id)

    if not result.success:
        status_code = (
            status_for_code(result.error_code)
            if result.error_code in ("NOT_FOUND", "ACCESS_DENIED")
            else status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        raise HTTPException(status_code=status_code, detail=result.error)

    file_path = result.data["file_path"]
    log.info("presentation.export.stream", path=file_path)
    return FileResponse(
        file_path,
        media_type=PPTX_MIME_TYPE,
        filename=EXPORT_FILENAME,
        background=BackgroundTask(file_store.unlink, file_path),
    )

"""
Presentation template uploads.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from deckstudio.api.dependencies import get_file_store, get_requester_id, get_unit_of_work
from deckstudio.api.errors import raise_for_result
from deckstudio.api.schemas import TemplateOut, TemplateUploadResponse
from deckstudio.application.unit_of_work import UnitOfWork
from deckstudio.application.use_cases import UploadTemplateUseCase
from deckstudio.domain.value_objects.uploaded_file import UploadedFile
from deckstudio.infra.config.logging_config import get_logger
from deckstudio.infra.config.settings import Settings, get_settings
from deckstudio.infra.storage.local_file_store import LocalFileStore

router = APIRouter(prefix="/templates", tags=["templates"])
log = get_logger("api.templates")


async def read_upload(file: UploadFile, max_bytes: int) -> UploadedFile:
    """
    Read at most one byte past the size cap.

    An oversize body still fails the size check, without being held in memory.
    """
    return UploadedFile(
        filename=file.filename or "",
        content_type=file.content_type or "",
        data=await file.read(max_bytes + 1),
    )


@router.post(
    "", response_model=TemplateUploadResponse, status_code=status.HTTP_201_CREATED
)
async def upload_template(
    file: Optional[UploadFile] = File(None),
    name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    requester_id: Optional[str] = Depends(get_requester_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    file_store: LocalFileStore = Depends(get_file_store),
    settings: Settings = Depends(get_settings),
) -> TemplateUploadResponse:
    """
    Upload a .pptx template.

    Form fields are optional at the HTTP level so that missing values are
    reported with the same messages as every other upload rejection.
    """
    uploaded = None
    if file is not None:
        uploaded = await read_upload(file, settings.template_max_bytes)
        log.info("template.upload.request", filename=uploaded.filename, size=uploaded.size)

    use_case = UploadTemplateUseCase(
        uow, file_store, max_size=settings.template_max_bytes
    )
    result = raise_for_result(
        await use_case.execute(
            file=uploaded, name=name, description=description, owner_id=requester_id
        )
    )
    return TemplateUploadResponse(
        message=result.message, template=TemplateOut.from_entity(result.data["template"])
    )

"""
Use Case: Upload Template

Validates an uploaded pptx, writes it under the templates directory and
records it. The file is only kept once the record is committed.
"""

from typing import Optional

from deckstudio.application.results import OperationResult, operation_boundary
from deckstudio.application.unit_of_work import UnitOfWork
from deckstudio.domain.entities.template_upload import TemplateUpload
from deckstudio.domain.exceptions import ValidationError
from deckstudio.domain.validators import TemplateValidators
from deckstudio.domain.validators.template_validators import MAX_FILE_SIZE
from deckstudio.domain.value_objects.uploaded_file import UploadedFile
from deckstudio.infra.config.logging_config import get_logger
from deckstudio.infra.storage.local_file_store import LocalFileStore


class UploadTemplateUseCase:
    def __init__(
        self,
        uow: UnitOfWork,
        file_store: LocalFileStore,
        max_size: int = MAX_FILE_SIZE,
    ):
        self.uow = uow
        self.file_store = file_store
        self.max_size = max_size
        self._log = get_logger("usecase.upload_template")

    @operation_boundary("Failed to upload template")
    async def execute(
        self,
        file: Optional[UploadedFile],
        name: Optional[str],
        description: Optional[str] = None,
        owner_id: Optional[str] = None,
    ) -> OperationResult:
        try:
            TemplateValidators.validate_upload(file, name, self.max_size)
        except ValidationError as exc:
            self._log.info("template.upload.rejected", reason=exc.message)
            raise

        async with self.file_store.reserve(file.filename) as stored:
            await stored.write(file.data)
            template = TemplateUpload(
                name=name.strip(),
                filename=file.filename,
                stored_file=stored.name,
                description=description,
                owner_id=owner_id,
            )
            async with self.uow:
                await self.uow.template_repo.create(template)
                await self.uow.commit()
            stored.commit()

        self._log.info(
            "template.upload", template_id=template.id, stored_file=template.stored_file
        )
        return OperationResult.ok(
            "Template uploaded successfully", template=template
        )

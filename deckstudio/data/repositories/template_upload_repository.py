"""
Template upload repository for data access operations.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from deckstudio.application.ports import TemplateUploadRepositoryPort
from deckstudio.data.models.template_upload_model import TemplateUploadModel
from deckstudio.domain.entities.template_upload import TemplateUpload
from deckstudio.infra.config.logging_config import get_logger


class TemplateUploadRepository(TemplateUploadRepositoryPort):
    def __init__(self, session: AsyncSession):
        self.session = session
        self._log = get_logger("repo.template_upload")

    async def create(self, template: TemplateUpload) -> TemplateUpload:
        model = TemplateUploadModel(
            id=template.id,
            name=template.name,
            description=template.description,
            filename=template.filename,
            stored_file=template.stored_file,
            owner_id=template.owner_id,
            created_at=template.created_at,
        )
        self.session.add(model)
        await self.session.flush()

        self._log.info("template.create", template_id=template.id, name=template.name)
        return template

    async def get_by_id(self, template_id: str) -> Optional[TemplateUpload]:
        result = await self.session.execute(
            select(TemplateUploadModel).where(TemplateUploadModel.id == template_id)
        )
        model = result.scalar_one_or_none()
        if model is None:
            self._log.info("template.get.not_found", template_id=template_id)
            return None

        return TemplateUpload(
            id=model.id,
            name=model.name,
            description=model.description,
            filename=model.filename,
            stored_file=model.stored_file,
            owner_id=model.owner_id,
            created_at=model.created_at,
        )

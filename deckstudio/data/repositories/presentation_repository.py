"""
Presentation repository for data access operations.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from deckstudio.application.ports import PresentationRepositoryPort
from deckstudio.data.models.presentation_model import (
    BaseDocumentModel,
    PresentationModel,
)
from deckstudio.domain.entities.presentation import (
    PresentationContent,
    PresentationDocument,
)
from deckstudio.domain.exceptions import PresentationNotFoundError
from deckstudio.domain.value_objects.document_type import DocumentType
from deckstudio.infra.config.logging_config import get_logger


class PresentationRepository(PresentationRepositoryPort):
    def __init__(self, session: AsyncSession):
        self.session = session
        self._log = get_logger("repo.presentation")

    async def create(self, document: PresentationDocument) -> PresentationDocument:
        """Create a document together with its presentation content."""
        content = document.presentation
        model = BaseDocumentModel(
            id=document.id,
            title=document.title,
            document_type=document.document_type.value,
            is_public=document.is_public,
            owner_id=document.owner_id,
            created_at=document.created_at,
            updated_at=document.updated_at,
            presentation=PresentationModel(
                id=document.id,
                content=content.content,
                theme=content.theme,
                outline=content.outline,
                image_model=content.image_model,
                presentation_style=content.presentation_style,
                language=content.language,
                template_used_id=content.template_used_id,
                generated_file_path=content.generated_file_path,
            ),
        )

        self.session.add(model)
        await self.session.flush()

        self._log.info(
            "presentation.create", presentation_id=document.id, owner_id=document.owner_id
        )
        return document

    async def get_by_id(self, document_id: str) -> Optional[PresentationDocument]:
        model = await self._get_model(document_id)
        if model is None or model.presentation is None:
            self._log.info("presentation.get.not_found", presentation_id=document_id)
            return None

        self._log.info("presentation.get", presentation_id=document_id)
        return self._to_entity(model)

    async def update(self, document: PresentationDocument) -> PresentationDocument:
        """Write every field of the entity back; callers decide what changed."""
        model = await self._get_model(document.id)
        if model is None:
            raise PresentationNotFoundError(document.id)

        content = document.presentation
        model.title = document.title
        model.is_public = document.is_public
        model.updated_at = document.updated_at
        model.presentation.content = content.content
        model.presentation.theme = content.theme
        model.presentation.outline = content.outline
        model.presentation.image_model = content.image_model
        model.presentation.presentation_style = content.presentation_style
        model.presentation.language = content.language

        await self.session.flush()
        self._log.info("presentation.update", presentation_id=document.id)
        return document

    async def delete_many(self, document_ids: List[str]) -> int:
        """Delete documents by id; content rows go with them."""
        if not document_ids:
            return 0

        result = await self.session.execute(
            select(BaseDocumentModel).where(BaseDocumentModel.id.in_(document_ids))
        )
        models = result.scalars().all()
        for model in models:
            await self.session.delete(model)
        await self.session.flush()

        self._log.info(
            "presentation.delete",
            requested=len(document_ids),
            deleted=len(models),
        )
        return len(models)

    async def _get_model(self, document_id: str) -> Optional[BaseDocumentModel]:
        result = await self.session.execute(
            select(BaseDocumentModel).where(BaseDocumentModel.id == document_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    def _to_entity(model: BaseDocumentModel) -> PresentationDocument:
        """Convert SQLAlchemy model to domain entity."""
        presentation = model.presentation
        return PresentationDocument(
            id=model.id,
            title=model.title,
            document_type=DocumentType(model.document_type),
            is_public=model.is_public,
            owner_id=model.owner_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
            presentation=PresentationContent(
                content=presentation.content,
                theme=presentation.theme,
                outline=presentation.outline,
                image_model=presentation.image_model,
                presentation_style=presentation.presentation_style,
                language=presentation.language,
                template_used_id=presentation.template_used_id,
                generated_file_path=presentation.generated_file_path,
            ),
        )

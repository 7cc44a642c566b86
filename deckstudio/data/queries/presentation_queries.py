"""
Read-only queries for presentation listings (CQRS-lite).
"""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from deckstudio.application.ports import PresentationQueriesPort
from deckstudio.data.models.presentation_model import BaseDocumentModel
from deckstudio.data.repositories.presentation_repository import (
    PresentationRepository,
)
from deckstudio.domain.entities.presentation import PresentationDocument
from deckstudio.domain.value_objects.document_type import DocumentType
from deckstudio.domain.value_objects.listing import ListScope
from deckstudio.infra.config.logging_config import get_logger


class PresentationQueries(PresentationQueriesPort):
    def __init__(self, session: AsyncSession):
        self.session = session
        self._log = get_logger("queries.presentation")

    @staticmethod
    def _filters(scope: ListScope, owner_id: Optional[str]) -> list:
        filters = [BaseDocumentModel.document_type == DocumentType.PRESENTATION.value]
        if scope == ListScope.OWNER:
            if owner_id is not None:
                filters.append(BaseDocumentModel.owner_id == owner_id)
        elif scope == ListScope.PUBLIC:
            filters.append(BaseDocumentModel.is_public.is_(True))
        elif scope == ListScope.BY_OWNER:
            filters.append(BaseDocumentModel.owner_id == owner_id)
            filters.append(BaseDocumentModel.is_public.is_(True))
        return filters

    async def list_page(
        self,
        scope: ListScope,
        skip: int,
        limit: int,
        owner_id: Optional[str] = None,
    ) -> List[PresentationDocument]:
        """One page of presentations, most recently updated first."""
        result = await self.session.execute(
            select(BaseDocumentModel)
            .where(*self._filters(scope, owner_id))
            .order_by(BaseDocumentModel.updated_at.desc(), BaseDocumentModel.id)
            .offset(skip)
            .limit(limit)
        )
        items = [
            PresentationRepository._to_entity(model)
            for model in result.scalars().all()
            if model.presentation is not None
        ]
        self._log.info(
            "presentation.list", scope=scope.value, skip=skip, count=len(items)
        )
        return items

    async def count(self, scope: ListScope, owner_id: Optional[str] = None) -> int:
        result = await self.session.execute(
            select(func.count(BaseDocumentModel.id)).where(
                *self._filters(scope, owner_id)
            )
        )
        total = result.scalar_one()
        self._log.info("presentation.count", scope=scope.value, total=total)
        return total

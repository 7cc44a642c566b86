"""
Use Case: Create Presentation

Stores a new presentation document together with its content. Titles and
themes left blank fall back to their defaults.
"""

from typing import Any, Dict, List, Optional

from deckstudio.application.results import OperationResult, operation_boundary
from deckstudio.application.unit_of_work import UnitOfWork
from deckstudio.domain.entities.presentation import PresentationDocument
from deckstudio.domain.validators import PresentationValidators
from deckstudio.domain.value_objects.slide_content import empty_content
from deckstudio.infra.config.logging_config import bind_context, get_logger


class CreatePresentationUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self._log = get_logger("usecase.create_presentation")

    @operation_boundary("Failed to create presentation")
    async def execute(
        self,
        content: Dict[str, Any],
        title: Optional[str] = None,
        theme: Optional[str] = None,
        outline: Optional[List[str]] = None,
        image_model: Optional[str] = None,
        presentation_style: Optional[str] = None,
        language: Optional[str] = None,
        owner_id: Optional[str] = None,
        is_public: bool = False,
    ) -> OperationResult:
        """
        Validate the content and persist a new document.

        Returns:
            OperationResult with ``presentation`` set to the stored document
        """
        bind_context(owner_id=owner_id)
        self._log.info("usecase.start", action="create_presentation")

        PresentationValidators.validate_content(content)
        PresentationValidators.validate_outline(outline)

        document = PresentationDocument.new(
            content=content,
            title=title,
            theme=theme,
            owner_id=owner_id,
            is_public=is_public,
            outline=outline,
            image_model=image_model,
            presentation_style=presentation_style,
            language=language,
        )

        async with self.uow:
            await self.uow.presentation_repo.create(document)
            await self.uow.commit()

        self._log.info("usecase.success", presentation_id=document.id)
        return OperationResult.ok(
            "Presentation created successfully", presentation=document
        )


class CreateEmptyPresentationUseCase:
    def __init__(self, uow: UnitOfWork):
        self.create = CreatePresentationUseCase(uow)

    async def execute(
        self,
        title: Optional[str] = None,
        theme: Optional[str] = None,
        owner_id: Optional[str] = None,
    ) -> OperationResult:
        return await self.create.execute(
            content=empty_content(), title=title, theme=theme, owner_id=owner_id
        )

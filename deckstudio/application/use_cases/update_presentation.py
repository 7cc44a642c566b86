"""
Use Case: Update Presentation

Partial update: every field passed as ``None`` keeps its stored value, and
every other field replaces the stored value wholesale. ``updated_at`` is
bumped on every successful call.
"""

from typing import Any, Dict, List, Optional

from deckstudio.application.ports import AccessPolicy
from deckstudio.application.results import OperationResult, operation_boundary
from deckstudio.application.unit_of_work import UnitOfWork
from deckstudio.application.use_cases.access import load_document
from deckstudio.domain.validators import PresentationValidators
from deckstudio.infra.auth.access_policy import get_access_policy
from deckstudio.infra.config.logging_config import bind_context, get_logger

# Fields stored on the content row rather than on the document.
CONTENT_FIELDS = (
    "content",
    "theme",
    "outline",
    "image_model",
    "presentation_style",
    "language",
)


class UpdatePresentationUseCase:
    def __init__(self, uow: UnitOfWork, access_policy: Optional[AccessPolicy] = None):
        self.uow = uow
        self.access_policy = access_policy or get_access_policy()
        self._log = get_logger("usecase.update_presentation")

    @operation_boundary("Failed to update presentation")
    async def execute(
        self,
        presentation_id: str,
        requester_id: Optional[str] = None,
        title: Optional[str] = None,
        content: Optional[Dict[str, Any]] = None,
        theme: Optional[str] = None,
        outline: Optional[List[str]] = None,
        image_model: Optional[str] = None,
        presentation_style: Optional[str] = None,
        language: Optional[str] = None,
        is_public: Optional[bool] = None,
    ) -> OperationResult:
        bind_context(presentation_id=presentation_id)

        if content is not None:
            PresentationValidators.validate_content(content)
        PresentationValidators.validate_outline(outline)

        changes = {
            "content": content,
            "theme": theme,
            "outline": outline,
            "image_model": image_model,
            "presentation_style": presentation_style,
            "language": language,
        }

        async with self.uow:
            document = await load_document(
                self.uow,
                presentation_id,
                self.access_policy,
                requester_id,
                for_update=True,
            )

            if title is not None:
                document.title = title
            if is_public is not None:
                document.is_public = is_public
            for name in CONTENT_FIELDS:
                if changes[name] is not None:
                    setattr(document.presentation, name, changes[name])
            document.touch()

            await self.uow.presentation_repo.update(document)
            await self.uow.commit()

        updated = [name for name, value in changes.items() if value is not None]
        if title is not None:
            updated.append("title")
        if is_public is not None:
            updated.append("is_public")
        self._log.info("usecase.success", fields=sorted(updated))

        return OperationResult.ok(
            "Presentation updated successfully", presentation=document
        )

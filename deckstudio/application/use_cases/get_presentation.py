"""
Use Cases: Get Presentation / Get Presentation Content
"""

from typing import Optional

from deckstudio.application.ports import AccessPolicy
from deckstudio.application.results import OperationResult, operation_boundary
from deckstudio.application.unit_of_work import UnitOfWork
from deckstudio.application.use_cases.access import load_document
from deckstudio.infra.auth.access_policy import get_access_policy
from deckstudio.infra.config.logging_config import get_logger


class GetPresentationUseCase:
    def __init__(self, uow: UnitOfWork, access_policy: Optional[AccessPolicy] = None):
        self.uow = uow
        self.access_policy = access_policy or get_access_policy()
        self._log = get_logger("usecase.get_presentation")

    @operation_boundary("Failed to fetch presentation")
    async def execute(
        self, presentation_id: str, requester_id: Optional[str] = None
    ) -> OperationResult:
        async with self.uow:
            document = await load_document(
                self.uow, presentation_id, self.access_policy, requester_id
            )
        return OperationResult.ok(presentation=document)


class GetPresentationContentUseCase:
    """Returns only the editable content of a presentation."""

    def __init__(self, uow: UnitOfWork, access_policy: Optional[AccessPolicy] = None):
        self.uow = uow
        self.access_policy = access_policy or get_access_policy()

    @operation_boundary("Failed to fetch presentation")
    async def execute(
        self, presentation_id: str, requester_id: Optional[str] = None
    ) -> OperationResult:
        async with self.uow:
            document = await load_document(
                self.uow, presentation_id, self.access_policy, requester_id
            )

        return OperationResult.ok(
            id=document.id,
            content=document.presentation.content,
            theme=document.presentation.theme,
            outline=document.presentation.outline,
        )

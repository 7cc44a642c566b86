"""
Use Case: Duplicate Presentation

The copy carries content and theme only. It gets a new id, is private, and
belongs to the requester.
"""

from typing import Optional

from deckstudio.application.ports import AccessPolicy
from deckstudio.application.results import OperationResult, operation_boundary
from deckstudio.application.unit_of_work import UnitOfWork
from deckstudio.application.use_cases.access import load_document
from deckstudio.infra.auth.access_policy import get_access_policy
from deckstudio.infra.config.logging_config import get_logger


class DuplicatePresentationUseCase:
    def __init__(self, uow: UnitOfWork, access_policy: Optional[AccessPolicy] = None):
        self.uow = uow
        self.access_policy = access_policy or get_access_policy()
        self._log = get_logger("usecase.duplicate_presentation")

    @operation_boundary("Failed to duplicate presentation")
    async def execute(
        self,
        presentation_id: str,
        new_title: Optional[str] = None,
        requester_id: Optional[str] = None,
    ) -> OperationResult:
        async with self.uow:
            original = await load_document(
                self.uow, presentation_id, self.access_policy, requester_id
            )
            copy = original.duplicate(new_title=new_title, owner_id=requester_id)
            await self.uow.presentation_repo.create(copy)
            await self.uow.commit()

        self._log.info(
            "usecase.success", source_id=presentation_id, presentation_id=copy.id
        )
        return OperationResult.ok(
            "Presentation duplicated successfully", presentation=copy
        )

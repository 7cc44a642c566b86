"""
Use Case: Delete Presentations

Deletes a batch of documents by id. Ids that do not exist, or that the
requester may not modify, count as failures; the rest are removed in one
transaction.
"""

from typing import List, Optional

from deckstudio.application.ports import AccessPolicy
from deckstudio.application.results import OperationResult, operation_boundary
from deckstudio.application.unit_of_work import UnitOfWork
from deckstudio.domain.validators import PresentationValidators
from deckstudio.infra.auth.access_policy import get_access_policy
from deckstudio.infra.config.logging_config import get_logger


class DeletePresentationsUseCase:
    def __init__(self, uow: UnitOfWork, access_policy: Optional[AccessPolicy] = None):
        self.uow = uow
        self.access_policy = access_policy or get_access_policy()
        self._log = get_logger("usecase.delete_presentations")

    @operation_boundary("Failed to delete presentations")
    async def execute(
        self, ids: List[str], requester_id: Optional[str] = None
    ) -> OperationResult:
        PresentationValidators.validate_ids(ids)
        self._log.info("usecase.start", action="delete_presentations", requested=len(ids))

        async with self.uow:
            allowed: List[str] = []
            for presentation_id in ids:
                document = await self.uow.presentation_repo.get_by_id(presentation_id)
                if document and self.access_policy.can_modify(document, requester_id):
                    allowed.append(presentation_id)

            deleted_count = await self.uow.presentation_repo.delete_many(allowed)
            await self.uow.commit()

        failed_count = len(ids) - deleted_count
        self._log.info(
            "usecase.success", deleted_count=deleted_count, failed_count=failed_count
        )

        if failed_count > 0 and deleted_count > 0:
            return OperationResult.ok(
                f"Deleted {deleted_count} presentations, "
                f"failed to delete {failed_count} presentations",
                partial_success=True,
                deleted_count=deleted_count,
                failed_count=failed_count,
            )
        if failed_count > 0:
            return OperationResult.fail(
                "Failed to delete presentations",
                "NOT_FOUND",
                deleted_count=0,
                failed_count=failed_count,
            )

        message = (
            "Presentation deleted successfully"
            if len(ids) == 1
            else f"{deleted_count} presentations deleted successfully"
        )
        return OperationResult.ok(
            message, deleted_count=deleted_count, failed_count=0
        )

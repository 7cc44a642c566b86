"""
Use Case: List Presentations

Listing strategies per scope:

* owner scope: ``has_more`` is inferred from a full page, which saves a
  count query but reports one extra empty page when the total is an exact
  multiple of the page size. ``exact_pagination`` switches it to counting.
* public and by_owner scopes: ``has_more`` comes from an exact count.

The owner scope includes private documents, so the access policy decides
whether the requester may list it.
"""

from typing import Optional

from deckstudio.application.ports import AccessPolicy
from deckstudio.application.results import OperationResult, operation_boundary
from deckstudio.application.unit_of_work import UnitOfWork
from deckstudio.domain.exceptions import AccessDeniedError, ValidationError
from deckstudio.domain.validators import PresentationValidators
from deckstudio.domain.value_objects.listing import (
    ListScope,
    Page,
    has_more_by_page_fullness,
    has_more_by_total,
)
from deckstudio.infra.auth.access_policy import get_access_policy
from deckstudio.infra.config.logging_config import get_logger


class ListPresentationsUseCase:
    def __init__(
        self,
        uow: UnitOfWork,
        access_policy: Optional[AccessPolicy] = None,
        page_size: int = 10,
        exact_pagination: bool = False,
    ):
        self.uow = uow
        self.access_policy = access_policy or get_access_policy()
        self.page_size = page_size
        self.exact_pagination = exact_pagination
        self._log = get_logger("usecase.list_presentations")

    @operation_boundary("Failed to list presentations")
    async def execute(
        self,
        page: int = 0,
        scope: ListScope = ListScope.OWNER,
        owner_id: Optional[str] = None,
        page_size: Optional[int] = None,
        requester_id: Optional[str] = None,
    ) -> OperationResult:
        size = page_size or self.page_size
        PresentationValidators.validate_page(page, size)
        if scope == ListScope.BY_OWNER and not owner_id:
            raise ValidationError("owner_id is required for the by_owner scope")
        if scope == ListScope.OWNER and not self.access_policy.can_list_all(
            owner_id, requester_id
        ):
            raise AccessDeniedError("You may only list your own presentations")

        skip = page * size
        async with self.uow:
            queries = self.uow.presentation_queries
            items = await queries.list_page(scope, skip, size, owner_id)

            if scope == ListScope.OWNER and not self.exact_pagination:
                has_more = has_more_by_page_fullness(len(items), size)
            else:
                total = await queries.count(scope, owner_id)
                has_more = has_more_by_total(skip, size, total)

        self._log.info(
            "usecase.success",
            scope=scope.value,
            page=page,
            count=len(items),
            has_more=has_more,
        )
        return OperationResult.ok(
            page=Page(items=items, has_more=has_more, page=page, page_size=size)
        )

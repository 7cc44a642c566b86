"""
Document loading shared by the use cases that act on one presentation.
"""

from typing import Optional

from deckstudio.application.ports import AccessPolicy
from deckstudio.application.unit_of_work import UnitOfWork
from deckstudio.domain.entities.presentation import PresentationDocument
from deckstudio.domain.exceptions import AccessDeniedError, PresentationNotFoundError


async def load_document(
    uow: UnitOfWork,
    presentation_id: str,
    policy: AccessPolicy,
    requester_id: Optional[str],
    for_update: bool = False,
) -> PresentationDocument:
    """
    Fetch a document and check the requester against the access policy.

    Raises:
        PresentationNotFoundError: If no document has this id.
        AccessDeniedError: If the policy refuses the requester.
    """
    document = await uow.presentation_repo.get_by_id(presentation_id)
    if document is None:
        raise PresentationNotFoundError(presentation_id)

    allowed = (
        policy.can_modify(document, requester_id)
        if for_update
        else policy.can_read(document, requester_id)
    )
    if not allowed:
        raise AccessDeniedError("You do not have access to this presentation")
    return document

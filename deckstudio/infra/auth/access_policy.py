"""
Access policies for presentation documents.

There is no authentication in this service; the requester id is whatever the
caller supplies. ``OpenAccessPolicy`` (the default) lets everyone through.
``OwnerAccessPolicy`` restricts changes to the owner and reads to the owner
or public documents. Listing private documents is limited to one's own.
"""

from typing import Optional

from deckstudio.application.ports import AccessPolicy
from deckstudio.domain.entities.presentation import PresentationDocument
from deckstudio.infra.config.settings import get_settings


class OpenAccessPolicy(AccessPolicy):
    def can_read(
        self, document: PresentationDocument, requester_id: Optional[str]
    ) -> bool:
        return True

    def can_modify(
        self, document: PresentationDocument, requester_id: Optional[str]
    ) -> bool:
        return True

    def can_list_all(self, owner_id: Optional[str], requester_id: Optional[str]) -> bool:
        return True


class OwnerAccessPolicy(AccessPolicy):
    def can_read(
        self, document: PresentationDocument, requester_id: Optional[str]
    ) -> bool:
        return document.is_public or self.can_modify(document, requester_id)

    def can_modify(
        self, document: PresentationDocument, requester_id: Optional[str]
    ) -> bool:
        # Unowned documents stay editable by anyone.
        return document.owner_id is None or document.owner_id == requester_id

    def can_list_all(self, owner_id: Optional[str], requester_id: Optional[str]) -> bool:
        return owner_id is not None and owner_id == requester_id


_POLICIES = {"open": OpenAccessPolicy, "owner": OwnerAccessPolicy}


def get_access_policy() -> AccessPolicy:
    """Dependency for the configured access policy."""
    name = get_settings().access_policy.lower()
    try:
        return _POLICIES[name]()
    except KeyError:
        raise ValueError(f"Unknown access policy: {name}")

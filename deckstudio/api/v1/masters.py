"""
Read-only listing of the built-in master templates.
"""

from fastapi import APIRouter, Depends

from deckstudio.api.dependencies import get_registry
from deckstudio.api.schemas import MasterOut, MastersResponse
from deckstudio.infra.assets.master_registry import MasterRegistry

router = APIRouter(prefix="/masters", tags=["masters"])


@router.get("", response_model=MastersResponse)
async def list_masters(
    registry: MasterRegistry = Depends(get_registry),
) -> MastersResponse:
    return MastersResponse(
        masters=[MasterOut.from_master(master) for master in registry.all().values()]
    )

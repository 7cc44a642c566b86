"""
FastAPI router for presentation documents.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from deckstudio.api.dependencies import (
    get_deck_writer,
    get_file_store,
    get_policy,
    get_presentation_builder,
    get_requester_id,
    get_unit_of_work,
)
from deckstudio.api.errors import raise_for_result
from deckstudio.api.schemas import (
    CreateEmptyPresentationRequest,
    CreatePresentationRequest,
    DeletePresentationsRequest,
    DeletePresentationsResponse,
    DuplicatePresentationRequest,
    GeneratePresentationRequest,
    GeneratePresentationResponse,
    PresentationContentResponse,
    PresentationListResponse,
    PresentationOut,
    PresentationResponse,
    PresentationSummary,
    UpdatePresentationRequest,
)
from deckstudio.application.ports import AccessPolicy, DeckWriterPort
from deckstudio.application.services.presentation_builder import PresentationBuilder
from deckstudio.application.unit_of_work import UnitOfWork
from deckstudio.application.use_cases import (
    CreateEmptyPresentationUseCase,
    CreatePresentationUseCase,
    DeletePresentationsUseCase,
    DuplicatePresentationUseCase,
    GeneratePresentationFromTemplateUseCase,
    GetPresentationContentUseCase,
    GetPresentationUseCase,
    ListPresentationsUseCase,
    UpdatePresentationUseCase,
)
from deckstudio.domain.value_objects.listing import ListScope
from deckstudio.infra.config.logging_config import bind_context, get_logger
from deckstudio.infra.config.settings import Settings, get_settings
from deckstudio.infra.storage.local_file_store import LocalFileStore

router = APIRouter(prefix="/presentations", tags=["presentations"])
log = get_logger("api.presentations")


def _presentation_response(result) -> PresentationResponse:
    return PresentationResponse(
        message=result.message,
        presentation=PresentationOut.from_entity(result.data["presentation"]),
    )


@router.post(
    "", response_model=PresentationResponse, status_code=status.HTTP_201_CREATED
)
async def create_presentation(
    request: CreatePresentationRequest,
    requester_id: Optional[str] = Depends(get_requester_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> PresentationResponse:
    log.info("presentation.create.request", has_outline=request.outline is not None)
    result = await CreatePresentationUseCase(uow).execute(
        owner_id=requester_id, **request.model_dump()
    )
    return _presentation_response(raise_for_result(result))


@router.post(
    "/empty", response_model=PresentationResponse, status_code=status.HTTP_201_CREATED
)
async def create_empty_presentation(
    request: Optional[CreateEmptyPresentationRequest] = None,
    requester_id: Optional[str] = Depends(get_requester_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> PresentationResponse:
    request = request or CreateEmptyPresentationRequest()
    result = await CreateEmptyPresentationUseCase(uow).execute(
        title=request.title, theme=request.theme, owner_id=requester_id
    )
    return _presentation_response(raise_for_result(result))


@router.get("", response_model=PresentationListResponse)
async def list_presentations(
    page: int = Query(0, ge=0),
    scope: ListScope = Query(ListScope.OWNER),
    owner_id: Optional[str] = Query(None),
    requester_id: Optional[str] = Depends(get_requester_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    policy: AccessPolicy = Depends(get_policy),
    settings: Settings = Depends(get_settings),
) -> PresentationListResponse:
    """
    List presentations, most recently updated first.

    The owner scope defaults to the requester's own presentations.
    """
    if scope == ListScope.OWNER and owner_id is None:
        owner_id = requester_id

    use_case = ListPresentationsUseCase(
        uow,
        policy,
        page_size=settings.page_size,
        exact_pagination=settings.exact_pagination,
    )
    result = raise_for_result(
        await use_case.execute(
            page=page, scope=scope, owner_id=owner_id, requester_id=requester_id
        )
    )
    listing = result.data["page"]
    return PresentationListResponse(
        presentations=[PresentationSummary.from_entity(doc) for doc in listing.items],
        has_more=listing.has_more,
        page=listing.page,
        page_size=listing.page_size,
    )


@router.post(
    "/generate",
    response_model=GeneratePresentationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def generate_presentation(
    request: GeneratePresentationRequest,
    requester_id: Optional[str] = Depends(get_requester_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    builder: PresentationBuilder = Depends(get_presentation_builder),
    writer: DeckWriterPort = Depends(get_deck_writer),
    file_store: LocalFileStore = Depends(get_file_store),
) -> GeneratePresentationResponse:
    """Build a deck from per-slide placeholder data and store it."""
    log.info("presentation.generate.request", slides=len(request.slides_data))
    use_case = GeneratePresentationFromTemplateUseCase(
        uow=uow, builder=builder, writer=writer, file_store=file_store
    )
    result = raise_for_result(
        await use_case.execute(
            slides_data=[slide.model_dump() for slide in request.slides_data],
            new_presentation_title=request.new_presentation_title,
            master_set_name=request.master_set_name,
            template_upload_id=request.template_upload_id,
            owner_id=requester_id,
        )
    )
    return GeneratePresentationResponse(message=result.message, **result.data)


@router.post("/delete", response_model=DeletePresentationsResponse)
async def delete_presentations(
    request: DeletePresentationsRequest,
    requester_id: Optional[str] = Depends(get_requester_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    policy: AccessPolicy = Depends(get_policy),
) -> DeletePresentationsResponse:
    result = raise_for_result(
        await DeletePresentationsUseCase(uow, policy).execute(
            request.ids, requester_id=requester_id
        )
    )
    return DeletePresentationsResponse(message=result.message, **result.data)


@router.get("/{presentation_id}", response_model=PresentationResponse)
async def get_presentation(
    presentation_id: str,
    requester_id: Optional[str] = Depends(get_requester_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    policy: AccessPolicy = Depends(get_policy),
) -> PresentationResponse:
    bind_context(presentation_id=presentation_id)
    result = await GetPresentationUseCase(uow, policy).execute(
        presentation_id, requester_id=requester_id
    )
    return _presentation_response(raise_for_result(result))


@router.get("/{presentation_id}/content", response_model=PresentationContentResponse)
async def get_presentation_content(
    presentation_id: str,
    requester_id: Optional[str] = Depends(get_requester_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    policy: AccessPolicy = Depends(get_policy),
) -> PresentationContentResponse:
    result = raise_for_result(
        await GetPresentationContentUseCase(uow, policy).execute(
            presentation_id, requester_id=requester_id
        )
    )
    return PresentationContentResponse(**result.data)


@router.patch("/{presentation_id}", response_model=PresentationResponse)
async def update_presentation(
    presentation_id: str,
    request: UpdatePresentationRequest,
    requester_id: Optional[str] = Depends(get_requester_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    policy: AccessPolicy = Depends(get_policy),
) -> PresentationResponse:
    bind_context(presentation_id=presentation_id)
    result = await UpdatePresentationUseCase(uow, policy).execute(
        presentation_id,
        requester_id=requester_id,
        **request.model_dump(exclude_none=True),
    )
    return _presentation_response(raise_for_result(result))


@router.delete("/{presentation_id}", response_model=DeletePresentationsResponse)
async def delete_presentation(
    presentation_id: str,
    requester_id: Optional[str] = Depends(get_requester_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    policy: AccessPolicy = Depends(get_policy),
) -> DeletePresentationsResponse:
    result = raise_for_result(
        await DeletePresentationsUseCase(uow, policy).execute(
            [presentation_id], requester_id=requester_id
        )
    )
    return DeletePresentationsResponse(message=result.message, **result.data)


@router.post(
    "/{presentation_id}/duplicate",
    response_model=PresentationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def duplicate_presentation(
    presentation_id: str,
    request: Optional[DuplicatePresentationRequest] = None,
    requester_id: Optional[str] = Depends(get_requester_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    policy: AccessPolicy = Depends(get_policy),
) -> PresentationResponse:
    request = request or DuplicatePresentationRequest()
    result = await DuplicatePresentationUseCase(uow, policy).execute(
        presentation_id, new_title=request.new_title, requester_id=requester_id
    )
    return _presentation_response(raise_for_result(result))

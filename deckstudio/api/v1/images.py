"""
AI image generation.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status

from deckstudio.api.dependencies import (
    get_file_hosting,
    get_image_fetcher,
    get_image_generator,
    get_requester_id,
    get_unit_of_work,
)
from deckstudio.api.errors import raise_for_result
from deckstudio.api.schemas import (
    GenerateImageRequest,
    GenerateImageResponse,
    GeneratedImageOut,
)
from deckstudio.application.ports import (
    FileHostingPort,
    ImageFetcherPort,
    ImageGenerationPort,
)
from deckstudio.application.unit_of_work import UnitOfWork
from deckstudio.application.use_cases import GenerateImageUseCase

router = APIRouter(prefix="/images", tags=["images"])


@router.post(
    "", response_model=GenerateImageResponse, status_code=status.HTTP_201_CREATED
)
async def generate_image(
    request: GenerateImageRequest,
    requester_id: Optional[str] = Depends(get_requester_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    generator: ImageGenerationPort = Depends(get_image_generator),
    fetcher: ImageFetcherPort = Depends(get_image_fetcher),
    hosting: FileHostingPort = Depends(get_file_hosting),
) -> GenerateImageResponse:
    use_case = GenerateImageUseCase(
        uow=uow, generator=generator, fetcher=fetcher, hosting=hosting
    )
    result = raise_for_result(
        await use_case.execute(
            prompt=request.prompt, model=request.model, owner_id=requester_id
        )
    )
    return GenerateImageResponse(
        image=GeneratedImageOut.from_entity(result.data["image"])
    )

"""
Use Case: Generate Image

1. Ask the image model for one image
2. Download it
3. Re-host it under a permanent URL
4. Record the generated image
"""

import re
import time
from typing import Optional, Union

from deckstudio.application.ports import (
    FileHostingPort,
    ImageFetcherPort,
    ImageGenerationPort,
)
from deckstudio.application.results import OperationResult, operation_boundary
from deckstudio.application.unit_of_work import UnitOfWork
from deckstudio.domain.entities.generated_image import GeneratedImage
from deckstudio.domain.exceptions import ValidationError
from deckstudio.domain.value_objects.image_model import ImageModel
from deckstudio.infra.config.logging_config import get_logger

_FILENAME_UNSAFE = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def image_filename(prompt: str, millis: Optional[int] = None) -> str:
    """``<first 20 chars of prompt, sanitized>_<epoch ms>.png``"""
    if millis is None:
        millis = int(time.time() * 1000)
    return f"{_FILENAME_UNSAFE.sub('_', prompt[:20])}_{millis}.png"


class GenerateImageUseCase:
    def __init__(
        self,
        uow: UnitOfWork,
        generator: ImageGenerationPort,
        fetcher: ImageFetcherPort,
        hosting: FileHostingPort,
    ):
        self.uow = uow
        self.generator = generator
        self.fetcher = fetcher
        self.hosting = hosting
        self._log = get_logger("usecase.generate_image")

    @operation_boundary("Failed to generate image")
    async def execute(
        self,
        prompt: str,
        model: Union[ImageModel, str, None] = None,
        owner_id: Optional[str] = None,
    ) -> OperationResult:
        if not prompt or not prompt.strip():
            raise ValidationError("Prompt is required")
        try:
            image_model = ImageModel(model) if model else ImageModel.default()
        except ValueError as exc:
            raise ValidationError(f"Unsupported image model: {model}") from exc

        self._log.info("usecase.start", action="generate_image", model=image_model.value)

        temporary_url = await self.generator.generate(prompt, image_model)
        data = await self.fetcher.fetch(temporary_url)
        permanent_url = await self.hosting.upload_file(data, image_filename(prompt))

        image = GeneratedImage(url=permanent_url, prompt=prompt, owner_id=owner_id)
        async with self.uow:
            await self.uow.image_repo.create(image)
            await self.uow.commit()

        self._log.info("usecase.success", image_id=image.id, url=permanent_url)
        return OperationResult.ok(image=image)

"""
OpenAI image generation client.
"""

from typing import Optional

from openai import AsyncOpenAI, OpenAIError

from deckstudio.application.ports import ImageGenerationPort
from deckstudio.domain.exceptions import ExternalServiceError
from deckstudio.domain.value_objects.image_model import ImageModel
from deckstudio.infra.config.logging_config import get_logger


class OpenAIImageClient(ImageGenerationPort):
    """Generates one image per prompt and returns its (temporary) URL."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        size: str = "1024x1024",
        client: Optional[AsyncOpenAI] = None,
    ):
        self.client = client or AsyncOpenAI(api_key=api_key)
        self.size = size
        self._log = get_logger("infra.openai_images")

    async def generate(self, prompt: str, model: ImageModel) -> str:
        self._log.info("image.generate.start", model=model.value)
        try:
            response = await self.client.images.generate(
                model=model.value,
                prompt=prompt,
                n=1,
                size=self.size,
            )
        except OpenAIError as exc:
            self._log.warning("image.generate.failed", error=str(exc))
            raise ExternalServiceError(f"Image generation failed: {exc}") from exc

        url = response.data[0].url if response.data else None
        if not url:
            raise ExternalServiceError("Failed to generate image with OpenAI")

        self._log.info("image.generate.done", model=model.value)
        return url

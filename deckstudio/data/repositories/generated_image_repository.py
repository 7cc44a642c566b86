"""
Generated image repository.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from deckstudio.application.ports import GeneratedImageRepositoryPort
from deckstudio.data.models.generated_image_model import GeneratedImageModel
from deckstudio.domain.entities.generated_image import GeneratedImage
from deckstudio.infra.config.logging_config import get_logger


class GeneratedImageRepository(GeneratedImageRepositoryPort):
    def __init__(self, session: AsyncSession):
        self.session = session
        self._log = get_logger("repo.generated_image")

    async def create(self, image: GeneratedImage) -> GeneratedImage:
        self.session.add(
            GeneratedImageModel(
                id=image.id,
                url=image.url,
                prompt=image.prompt,
                owner_id=image.owner_id,
                created_at=image.created_at,
            )
        )
        await self.session.flush()
        self._log.info("image.create", image_id=image.id)
        return image

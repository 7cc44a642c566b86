"""
Image generation schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from deckstudio.domain.entities.generated_image import GeneratedImage
from deckstudio.domain.value_objects.image_model import ImageModel

from .base import BaseResponse


class GenerateImageRequest(BaseModel):
    prompt: str = Field(..., min_length=1, max_length=4000)
    model: ImageModel = ImageModel.DALL_E_3


class GeneratedImageOut(BaseModel):
    id: str
    url: str
    prompt: str
    owner_id: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, image: GeneratedImage) -> "GeneratedImageOut":
        return cls(
            id=image.id,
            url=image.url,
            prompt=image.prompt,
            owner_id=image.owner_id,
            created_at=image.created_at,
        )


class GenerateImageResponse(BaseResponse):
    image: GeneratedImageOut

"""
Image generation model value object.
"""

from enum import Enum


class ImageModel(str, Enum):
    """Closed set of image models accepted by the generator."""

    DALL_E_3 = "dall-e-3"
    DALL_E_2 = "dall-e-2"

    @classmethod
    def default(cls) -> "ImageModel":
        return cls.DALL_E_3

"""Domain entities exports."""

from .presentation import PresentationContent, PresentationDocument
from .template_upload import TemplateUpload
from .generated_image import GeneratedImage

__all__ = [
    "PresentationContent",
    "PresentationDocument",
    "TemplateUpload",
    "GeneratedImage",
]

"""SQLAlchemy models. Importing this package registers every table on Base."""

from .base import Base
from .presentation_model import BaseDocumentModel, PresentationModel
from .template_upload_model import TemplateUploadModel
from .generated_image_model import GeneratedImageModel

__all__ = [
    "Base",
    "BaseDocumentModel",
    "PresentationModel",
    "TemplateUploadModel",
    "GeneratedImageModel",
]

"""
Domain validators for uploaded presentation templates.
"""

from typing import Optional

from deckstudio.domain.exceptions import ValidationError
from deckstudio.domain.value_objects.uploaded_file import UploadedFile

PPTX_MIME_TYPE = (
    "application/vnd.openxmlformats-officedocument.presentationml.presentation"
)
ALLOWED_FILE_TYPES = (PPTX_MIME_TYPE,)
ALLOWED_EXTENSION = ".pptx"
MAX_FILE_SIZE = 10 * 1024 * 1024


class TemplateValidators:
    @staticmethod
    def validate_upload(
        file: Optional[UploadedFile],
        name: Optional[str],
        max_size: int = MAX_FILE_SIZE,
    ) -> None:
        """Validate an upload before anything touches storage."""
        if file is None:
            raise ValidationError("No file uploaded.")

        if not name or not name.strip():
            raise ValidationError("Template name is required.")

        if file.content_type not in ALLOWED_FILE_TYPES:
            raise ValidationError("Invalid file type. Only .pptx files are allowed.")

        if file.extension != ALLOWED_EXTENSION:
            raise ValidationError(
                "Invalid file extension. Only .pptx files are allowed."
            )

        if file.size > max_size:
            raise ValidationError(
                f"File is too large. Maximum size is {max_size // (1024 * 1024)}MB."
            )

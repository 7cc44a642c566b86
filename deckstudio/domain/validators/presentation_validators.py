"""
Domain validators for presentation documents.
"""

from typing import Any, List, Optional

from deckstudio.domain.exceptions import ValidationError
from deckstudio.domain.value_objects.slide_content import parse_slides


class PresentationValidators:
    @staticmethod
    def validate_content(content: Any) -> None:
        """Content must parse into the slide content model."""
        if not isinstance(content, dict):
            raise ValidationError("Presentation content must be an object")
        parse_slides(content)

    @staticmethod
    def validate_outline(outline: Optional[List[str]]) -> None:
        if outline is None:
            return
        if not isinstance(outline, list) or not all(
            isinstance(item, str) for item in outline
        ):
            raise ValidationError("Outline must be a list of strings")

    @staticmethod
    def validate_ids(ids: List[str]) -> None:
        if not ids:
            raise ValidationError("At least one presentation id is required")

    @staticmethod
    def validate_page(page: int, page_size: int) -> None:
        if page < 0:
            raise ValidationError("Page must be zero or greater")
        if page_size < 1:
            raise ValidationError("Page size must be at least 1")


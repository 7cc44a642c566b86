"""
Presentation document entity with core business rules.
"""

import copy
from dataclasses import dataclass, field
from datetime import datetime, UTC
from typing import Any, Dict, List, Optional
from uuid import uuid4

from deckstudio.domain.value_objects.document_type import DocumentType
from deckstudio.domain.value_objects.slide_content import Slide, parse_slides

DEFAULT_TITLE = "Untitled Presentation"
DEFAULT_THEME = "default"


@dataclass
class PresentationContent:
    content: Dict[str, Any]
    theme: str = DEFAULT_THEME
    outline: Optional[List[str]] = None
    image_model: Optional[str] = None
    presentation_style: Optional[str] = None
    language: Optional[str] = None
    template_used_id: Optional[str] = None
    generated_file_path: Optional[str] = None

    @property
    def slides(self) -> List[Slide]:
        return parse_slides(self.content)

    @property
    def slides_data(self) -> List[Dict[str, Any]]:
        return list((self.content or {}).get("slides_data") or [])


@dataclass
class PresentationDocument:
    title: str
    presentation: PresentationContent
    id: str = field(default_factory=lambda: str(uuid4()))
    document_type: DocumentType = DocumentType.PRESENTATION
    is_public: bool = False
    owner_id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def new(
        cls,
        content: Dict[str, Any],
        title: Optional[str] = None,
        theme: Optional[str] = None,
        owner_id: Optional[str] = None,
        is_public: bool = False,
        **content_fields: Any,
    ) -> "PresentationDocument":
        """Business rule: blank titles and themes fall back to defaults."""
        return cls(
            title=title or DEFAULT_TITLE,
            owner_id=owner_id,
            is_public=is_public,
            presentation=PresentationContent(
                content=content, theme=theme or DEFAULT_THEME, **content_fields
            ),
        )

    def duplicate(
        self, new_title: Optional[str] = None, owner_id: Optional[str] = None
    ) -> "PresentationDocument":
        """Business rule: a copy carries content and theme only, and is private."""
        return PresentationDocument.new(
            content=copy.deepcopy(self.presentation.content),
            title=new_title if new_title is not None else f"{self.title} (Copy)",
            theme=self.presentation.theme,
            owner_id=owner_id,
            is_public=False,
        )

    def touch(self) -> None:
        self.updated_at = datetime.now(UTC)

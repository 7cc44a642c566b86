"""
Presentation input/output schemas.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from deckstudio.domain.entities.presentation import PresentationDocument
from deckstudio.domain.value_objects.slide_content import empty_content

from .base import BaseResponse


# ---------- REQUESTS ----------
class CreatePresentationRequest(BaseModel):
    content: Dict[str, Any] = Field(default_factory=empty_content)
    title: Optional[str] = Field(None, max_length=255)
    theme: Optional[str] = Field(None, max_length=100)
    outline: Optional[List[str]] = None
    image_model: Optional[str] = None
    presentation_style: Optional[str] = None
    language: Optional[str] = None
    is_public: bool = False


class CreateEmptyPresentationRequest(BaseModel):
    title: Optional[str] = Field(None, max_length=255)
    theme: Optional[str] = Field(None, max_length=100)


class UpdatePresentationRequest(BaseModel):
    """Every field is optional; omitted fields keep their stored value."""

    title: Optional[str] = Field(None, max_length=255)
    content: Optional[Dict[str, Any]] = None
    theme: Optional[str] = Field(None, max_length=100)
    outline: Optional[List[str]] = None
    image_model: Optional[str] = None
    presentation_style: Optional[str] = None
    language: Optional[str] = None
    is_public: Optional[bool] = None


class DeletePresentationsRequest(BaseModel):
    ids: List[str] = Field(..., description="Presentation ids to delete")


class DuplicatePresentationRequest(BaseModel):
    new_title: Optional[str] = Field(None, max_length=255)


class SlideDataIn(BaseModel):
    master_name: str = Field(..., min_length=1)
    data: Dict[str, Any] = Field(
        default_factory=dict,
        description="Placeholder key to text, image URL/data URI, or tagged value",
    )


class GeneratePresentationRequest(BaseModel):
    slides_data: List[SlideDataIn] = Field(..., min_length=1)
    new_presentation_title: str = Field(..., max_length=255)
    master_set_name: Optional[str] = None
    template_upload_id: Optional[str] = None


# ---------- RESPONSES ----------
class PresentationSummary(BaseModel):
    id: str
    title: str
    theme: str
    is_public: bool
    owner_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, document: PresentationDocument) -> "PresentationSummary":
        return cls(
            id=document.id,
            title=document.title,
            theme=document.presentation.theme,
            is_public=document.is_public,
            owner_id=document.owner_id,
            created_at=document.created_at,
            updated_at=document.updated_at,
        )


class PresentationOut(PresentationSummary):
    document_type: str
    content: Dict[str, Any]
    outline: Optional[List[str]] = None
    image_model: Optional[str] = None
    presentation_style: Optional[str] = None
    language: Optional[str] = None
    template_used_id: Optional[str] = None

    @classmethod
    def from_entity(cls, document: PresentationDocument) -> "PresentationOut":
        content = document.presentation
        return cls(
            **PresentationSummary.from_entity(document).model_dump(),
            document_type=document.document_type.value,
            content=content.content,
            outline=content.outline,
            image_model=content.image_model,
            presentation_style=content.presentation_style,
            language=content.language,
            template_used_id=content.template_used_id,
        )


class PresentationResponse(BaseResponse):
    presentation: PresentationOut


class PresentationContentResponse(BaseResponse):
    id: str
    content: Dict[str, Any]
    theme: str
    outline: Optional[List[str]] = None


class PresentationListResponse(BaseResponse):
    presentations: List[PresentationSummary]
    has_more: bool
    page: int
    page_size: int


class DeletePresentationsResponse(BaseResponse):
    deleted_count: int
    failed_count: int
    partial_success: bool = False


class GeneratePresentationResponse(BaseResponse):
    presentation_id: str
    file_path: str

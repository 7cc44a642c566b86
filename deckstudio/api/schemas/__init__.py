"""API schemas."""

from .base import BaseResponse, ErrorResponse
from .image_io import GenerateImageRequest, GenerateImageResponse, GeneratedImageOut
from .presentation_io import (
    CreateEmptyPresentationRequest,
    CreatePresentationRequest,
    DeletePresentationsRequest,
    DeletePresentationsResponse,
    DuplicatePresentationRequest,
    GeneratePresentationRequest,
    GeneratePresentationResponse,
    PresentationContentResponse,
    PresentationListResponse,
    PresentationOut,
    PresentationResponse,
    PresentationSummary,
    SlideDataIn,
    UpdatePresentationRequest,
)
from .template_io import (
    MasterOut,
    MastersResponse,
    SlotOut,
    TemplateOut,
    TemplateUploadResponse,
)

__all__ = [
    "BaseResponse",
    "CreateEmptyPresentationRequest",
    "CreatePresentationRequest",
    "DeletePresentationsRequest",
    "DeletePresentationsResponse",
    "DuplicatePresentationRequest",
    "ErrorResponse",
    "GenerateImageRequest",
    "GenerateImageResponse",
    "GeneratePresentationRequest",
    "GeneratePresentationResponse",
    "GeneratedImageOut",
    "MasterOut",
    "MastersResponse",
    "PresentationContentResponse",
    "PresentationListResponse",
    "PresentationOut",
    "PresentationResponse",
    "PresentationSummary",
    "SlideDataIn",
    "SlotOut",
    "TemplateOut",
    "TemplateUploadResponse",
    "UpdatePresentationRequest",
]

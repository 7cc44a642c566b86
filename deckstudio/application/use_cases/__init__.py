"""Use case exports."""

from .create_presentation import (
    CreateEmptyPresentationUseCase,
    CreatePresentationUseCase,
)
from .delete_presentations import DeletePresentationsUseCase
from .duplicate_presentation import DuplicatePresentationUseCase
from .export_presentation import ExportPresentationUseCase
from .generate_image import GenerateImageUseCase
from .generate_presentation import GeneratePresentationFromTemplateUseCase
from .get_presentation import GetPresentationContentUseCase, GetPresentationUseCase
from .list_presentations import ListPresentationsUseCase
from .update_presentation import UpdatePresentationUseCase
from .upload_template import UploadTemplateUseCase

__all__ = [
    "CreateEmptyPresentationUseCase",
    "CreatePresentationUseCase",
    "DeletePresentationsUseCase",
    "DuplicatePresentationUseCase",
    "ExportPresentationUseCase",
    "GenerateImageUseCase",
    "GeneratePresentationFromTemplateUseCase",
    "GetPresentationContentUseCase",
    "GetPresentationUseCase",
    "ListPresentationsUseCase",
    "UpdatePresentationUseCase",
    "UploadTemplateUseCase",
]

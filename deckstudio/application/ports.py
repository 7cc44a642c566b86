"""
Application ports - abstract interfaces for external dependencies.

These interfaces define the contracts that the application layer needs
from external systems, following the Dependency Inversion Principle.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from deckstudio.domain.entities.generated_image import GeneratedImage
from deckstudio.domain.entities.presentation import PresentationDocument
from deckstudio.domain.entities.template_upload import TemplateUpload
from deckstudio.domain.value_objects.deck import Deck
from deckstudio.domain.value_objects.image_model import ImageModel
from deckstudio.domain.value_objects.listing import ListScope


class PresentationRepositoryPort(ABC):
    """Abstract repository interface for presentation documents."""

    @abstractmethod
    async def create(self, document: PresentationDocument) -> PresentationDocument:
        pass

    @abstractmethod
    async def get_by_id(self, document_id: str) -> Optional[PresentationDocument]:
        pass

    @abstractmethod
    async def update(self, document: PresentationDocument) -> PresentationDocument:
        pass

    @abstractmethod
    async def delete_many(self, document_ids: List[str]) -> int:
        """Delete documents (and their content); return how many existed."""
        pass


class PresentationQueriesPort(ABC):
    """Read-side listing of presentation documents."""

    @abstractmethod
    async def list_page(
        self,
        scope: ListScope,
        skip: int,
        limit: int,
        owner_id: Optional[str] = None,
    ) -> List[PresentationDocument]:
        pass

    @abstractmethod
    async def count(self, scope: ListScope, owner_id: Optional[str] = None) -> int:
        pass


class TemplateUploadRepositoryPort(ABC):
    @abstractmethod
    async def create(self, template: TemplateUpload) -> TemplateUpload:
        pass

    @abstractmethod
    async def get_by_id(self, template_id: str) -> Optional[TemplateUpload]:
        pass


class GeneratedImageRepositoryPort(ABC):
    @abstractmethod
    async def create(self, image: GeneratedImage) -> GeneratedImage:
        pass


class ImageGenerationPort(ABC):
    """Text-to-image API."""

    @abstractmethod
    async def generate(self, prompt: str, model: ImageModel) -> str:
        """Return the URL of a single generated image."""
        pass


class FileHostingPort(ABC):
    """Third-party file hosting."""

    @abstractmethod
    async def upload_file(self, data: bytes, filename: str) -> str:
        """Upload bytes and return a permanent URL."""
        pass


class ImageFetcherPort(ABC):
    @abstractmethod
    async def fetch(self, url: str) -> bytes:
        pass


class DeckWriterPort(ABC):
    """Serializes a bound deck to a presentation file."""

    @abstractmethod
    async def write(self, deck: Deck, path: Path) -> Path:
        pass


class AccessPolicy(ABC):
    """Decides whether a requester may read or change a document."""

    @abstractmethod
    def can_read(
        self, document: PresentationDocument, requester_id: Optional[str]
    ) -> bool:
        pass

    @abstractmethod
    def can_modify(
        self, document: PresentationDocument, requester_id: Optional[str]
    ) -> bool:
        pass

    @abstractmethod
    def can_list_all(self, owner_id: Optional[str], requester_id: Optional[str]) -> bool:
        """Whether private documents of `owner_id` (every owner when None) may be listed."""
        pass

"""
API dependencies for dependency injection.

Collaborators are built per request from settings; tests replace them via
``app.dependency_overrides``.
"""

from typing import Annotated, Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from deckstudio.application.ports import (
    AccessPolicy,
    DeckWriterPort,
    FileHostingPort,
    ImageFetcherPort,
    ImageGenerationPort,
)
from deckstudio.application.services.presentation_builder import PresentationBuilder
from deckstudio.application.unit_of_work import UnitOfWork
from deckstudio.infra.assets.master_registry import (
    MasterRegistry,
    get_master_registry,
)
from deckstudio.infra.auth.access_policy import get_access_policy
from deckstudio.infra.config.database import get_db_session
from deckstudio.infra.config.logging_config import bind_context
from deckstudio.infra.config.settings import Settings, get_settings
from deckstudio.infra.images.http_image_fetcher import HttpImageFetcher
from deckstudio.infra.images.openai_image_client import OpenAIImageClient
from deckstudio.infra.rendering.deck_writer import PptxDeckWriter
from deckstudio.infra.storage.file_hosting_client import FileHostingClient
from deckstudio.infra.storage.local_file_store import LocalFileStore


async def get_requester_id(
    x_owner_id: Annotated[Optional[str], Header()] = None,
) -> Optional[str]:
    """Owner id sent by the caller; no authentication is performed."""
    requester_id = x_owner_id or None
    if requester_id:
        bind_context(owner_id=requester_id)
    return requester_id


async def get_unit_of_work(
    session: AsyncSession = Depends(get_db_session),
) -> UnitOfWork:
    return UnitOfWork(session=session)


def get_registry() -> MasterRegistry:
    return get_master_registry()


def get_policy() -> AccessPolicy:
    return get_access_policy()


def get_presentation_builder(
    registry: MasterRegistry = Depends(get_registry),
) -> PresentationBuilder:
    return PresentationBuilder(registry)


def get_image_fetcher(settings: Settings = Depends(get_settings)) -> ImageFetcherPort:
    return HttpImageFetcher(timeout=settings.http_timeout_seconds)


def get_deck_writer(
    fetcher: ImageFetcherPort = Depends(get_image_fetcher),
) -> DeckWriterPort:
    return PptxDeckWriter(fetcher)


def get_file_store(settings: Settings = Depends(get_settings)) -> LocalFileStore:
    return LocalFileStore(settings.upload_root)


def get_image_generator(
    settings: Settings = Depends(get_settings),
) -> ImageGenerationPort:
    return OpenAIImageClient(
        api_key=settings.openai_api_key, size=settings.openai_image_size
    )


def get_file_hosting(settings: Settings = Depends(get_settings)) -> FileHostingPort:
    return FileHostingClient(
        upload_url=settings.file_hosting_url,
        api_key=settings.file_hosting_api_key,
        timeout=settings.http_timeout_seconds,
    )

"""
Use Case: Export Presentation

Renders a stored document to a temporary pptx file. Documents edited in the
slide editor carry a ``slides`` content tree; documents produced from
placeholder data carry only ``slides_data``.
"""

from typing import Optional

from deckstudio.application.ports import AccessPolicy, DeckWriterPort
from deckstudio.application.results import OperationResult, operation_boundary
from deckstudio.application.services.presentation_builder import PresentationBuilder
from deckstudio.application.unit_of_work import UnitOfWork
from deckstudio.application.use_cases.access import load_document
from deckstudio.application.use_cases.generate_presentation import parse_slides_data
from deckstudio.infra.auth.access_policy import get_access_policy
from deckstudio.infra.config.logging_config import bind_context, get_logger
from deckstudio.infra.storage.local_file_store import LocalFileStore


class ExportPresentationUseCase:
    def __init__(
        self,
        uow: UnitOfWork,
        builder: PresentationBuilder,
        writer: DeckWriterPort,
        file_store: LocalFileStore,
        access_policy: Optional[AccessPolicy] = None,
    ):
        self.uow = uow
        self.builder = builder
        self.writer = writer
        self.file_store = file_store
        self.access_policy = access_policy or get_access_policy()
        self._log = get_logger("usecase.export_presentation")

    # Content that only fails while rendering is an export failure, not bad input.
    @operation_boundary(
        "Failed to export presentation", unprefixed_codes=("NOT_FOUND", "ACCESS_DENIED")
    )
    async def execute(
        self, presentation_id: str, requester_id: Optional[str] = None
    ) -> OperationResult:
        bind_context(presentation_id=presentation_id)

        async with self.uow:
            document = await load_document(
                self.uow, presentation_id, self.access_policy, requester_id
            )

        content = document.presentation
        slides = content.slides
        if slides or not content.slides_data:
            deck = self.builder.bind_from_content_tree(slides)
        else:
            deck = self.builder.bind_from_placeholder_data(
                parse_slides_data(content.slides_data)
            )

        path = self.file_store.generated_path()
        await self.writer.write(deck, path)

        self._log.info("usecase.success", slide_count=len(deck), path=str(path))
        return OperationResult.ok(file_path=str(path))

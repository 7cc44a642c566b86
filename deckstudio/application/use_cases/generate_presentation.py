"""
Use Case: Generate Presentation From Template

1. Bind the placeholder data onto the master templates
2. Write the deck to a fresh file under the generated decks directory
3. Persist a private document that records the inputs and the file path

A failure at any step removes the file written in step 2.
"""

from typing import Any, Dict, List, Optional

from deckstudio.application.ports import DeckWriterPort
from deckstudio.application.results import OperationResult, operation_boundary
from deckstudio.application.services.presentation_builder import PresentationBuilder
from deckstudio.application.unit_of_work import UnitOfWork
from deckstudio.domain.entities.presentation import PresentationDocument
from deckstudio.domain.exceptions import ValidationError
from deckstudio.domain.value_objects.slide_data import SlideData
from deckstudio.infra.config.logging_config import bind_context, get_logger
from deckstudio.infra.storage.local_file_store import LocalFileStore

DEFAULT_MASTER_SET = "DefaultMasters"


def parse_slides_data(raw_slides: Any) -> List[SlideData]:
    """Accept ``[{"master_name": ..., "data": {...}}, ...]``."""
    if not isinstance(raw_slides, list) or not raw_slides:
        raise ValidationError("slides_data must be a non-empty list")

    slides: List[SlideData] = []
    for index, raw in enumerate(raw_slides):
        if isinstance(raw, SlideData):
            slides.append(raw)
            continue
        if not isinstance(raw, dict) or not raw.get("master_name"):
            raise ValidationError(f"slides_data[{index}] needs a master_name")
        data = raw.get("data") or {}
        if not isinstance(data, dict):
            raise ValidationError(f"slides_data[{index}].data must be an object")
        slides.append(SlideData.from_raw(raw["master_name"], data))
    return slides


class GeneratePresentationFromTemplateUseCase:
    def __init__(
        self,
        uow: UnitOfWork,
        builder: PresentationBuilder,
        writer: DeckWriterPort,
        file_store: LocalFileStore,
    ):
        self.uow = uow
        self.builder = builder
        self.writer = writer
        self.file_store = file_store
        self._log = get_logger("usecase.generate_presentation")

    @operation_boundary("Failed to generate presentation")
    async def execute(
        self,
        slides_data: List[Dict[str, Any]],
        new_presentation_title: Optional[str] = None,
        master_set_name: Optional[str] = None,
        template_upload_id: Optional[str] = None,
        owner_id: Optional[str] = None,
    ) -> OperationResult:
        """
        Returns:
            OperationResult with ``presentation_id`` and ``file_path``
        """
        bind_context(owner_id=owner_id)
        slides = parse_slides_data(slides_data)
        self._log.info("usecase.start", action="generate_presentation", slides=len(slides))

        deck = self.builder.bind_from_placeholder_data(slides)
        path = self.file_store.generated_path()

        try:
            await self.writer.write(deck, path)

            document = PresentationDocument.new(
                content={
                    "slides": [],
                    "slides_data": [slide.to_dict() for slide in slides],
                },
                title=new_presentation_title,
                theme=master_set_name or DEFAULT_MASTER_SET,
                owner_id=owner_id,
                is_public=False,
                template_used_id=template_upload_id,
                generated_file_path=str(path),
            )
            async with self.uow:
                await self.uow.presentation_repo.create(document)
                await self.uow.commit()
        except Exception:
            self.file_store.unlink(path)
            raise

        self._log.info("usecase.success", presentation_id=document.id, path=str(path))
        return OperationResult.ok(
            "Presentation generated successfully",
            presentation_id=document.id,
            file_path=str(path),
        )

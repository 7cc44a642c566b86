"""
PPTX deck writer built on python-pptx.

python-pptx cannot define slide masters on the fly, so each bound slide is
drawn on the blank layout: the master's background colour, one styled text
box per filled text slot and one picture per image. Shape names carry the
placeholder key so a written file can be traced back to its master slots.
"""

import asyncio
import io
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.enum.text import MSO_ANCHOR, PP_ALIGN
from pptx.util import Inches, Pt

from deckstudio.application.ports import DeckWriterPort, ImageFetcherPort
from deckstudio.domain.exceptions import ExternalServiceError
from deckstudio.domain.value_objects.deck import BoundImage, BoundText, Deck, Frame
from deckstudio.domain.value_objects.master_template import (
    MasterTemplate,
    PlaceholderSlot,
)
from deckstudio.infra.assets.master_registry import SLIDE_HEIGHT_IN, SLIDE_WIDTH_IN
from deckstudio.infra.config.logging_config import get_logger

BLANK_LAYOUT_INDEX = 6

_ALIGN = {"left": PP_ALIGN.LEFT, "center": PP_ALIGN.CENTER, "right": PP_ALIGN.RIGHT}
_VALIGN = {"top": MSO_ANCHOR.TOP, "middle": MSO_ANCHOR.MIDDLE, "bottom": MSO_ANCHOR.BOTTOM}


class PptxDeckWriter(DeckWriterPort):
    def __init__(self, image_fetcher: ImageFetcherPort):
        self.image_fetcher = image_fetcher
        self._log = get_logger("infra.pptx_writer")

    async def write(self, deck: Deck, path: Path) -> Path:
        """Resolve images, render the deck and save it to ``path``."""
        path = Path(path)
        images = await self._resolve_images(deck)

        try:
            await asyncio.to_thread(self._render, deck, images, path)
        except Exception as exc:
            path.unlink(missing_ok=True)
            self._log.exception("pptx.write.failed", path=str(path))
            raise ExternalServiceError(f"Could not write presentation file: {exc}") from exc

        self._log.info("pptx.write", path=str(path), slide_count=len(deck.slides))
        return path

    async def _resolve_images(self, deck: Deck) -> Dict[str, bytes]:
        images: Dict[str, bytes] = {}
        for slide in deck.slides:
            for image in slide.images:
                if image.ref not in images:
                    images[image.ref] = await self.image_fetcher.fetch(image.ref)
        return images

    def _render(self, deck: Deck, images: Dict[str, bytes], path: Path) -> None:
        prs = Presentation()
        prs.slide_width = Inches(SLIDE_WIDTH_IN)
        prs.slide_height = Inches(SLIDE_HEIGHT_IN)
        layout = prs.slide_layouts[BLANK_LAYOUT_INDEX]

        for bound in deck.slides:
            master = deck.masters[bound.master_name]
            slide = prs.slides.add_slide(layout)

            fill = slide.background.fill
            fill.solid()
            fill.fore_color.rgb = RGBColor.from_string(master.background_color)

            for item in bound.items:
                if isinstance(item, BoundText):
                    slot = master.slot(item.placeholder)
                    self._add_text(slide, slot, item.text)
                elif isinstance(item, BoundImage):
                    x, y, w, h = self._image_geometry(master, item)
                    picture = slide.shapes.add_picture(
                        io.BytesIO(images[item.ref]),
                        Inches(x),
                        Inches(y),
                        Inches(w),
                        Inches(h),
                    )
                    if item.placeholder:
                        picture.name = item.placeholder

        path.parent.mkdir(parents=True, exist_ok=True)
        prs.save(str(path))

    @staticmethod
    def _image_geometry(
        master: MasterTemplate, image: BoundImage
    ) -> Tuple[float, float, float, float]:
        frame: Optional[Frame] = image.frame
        if frame is None and image.placeholder:
            slot = master.slot(image.placeholder)
            frame = Frame(x=slot.x, y=slot.y, w=slot.w, h=slot.h)
        return frame.x, frame.y, frame.w, frame.h

    @staticmethod
    def _add_text(slide, slot: PlaceholderSlot, text: str) -> None:
        box = slide.shapes.add_textbox(
            Inches(slot.x), Inches(slot.y), Inches(slot.w), Inches(slot.h)
        )
        box.name = slot.key
        frame = box.text_frame
        frame.word_wrap = True
        style = slot.style
        if style.valign in _VALIGN:
            frame.vertical_anchor = _VALIGN[style.valign]

        lines: List[str] = text.split("\n")
        for index, line in enumerate(lines):
            paragraph = frame.paragraphs[0] if index == 0 else frame.add_paragraph()
            if style.align in _ALIGN:
                paragraph.alignment = _ALIGN[style.align]
            run = paragraph.add_run()
            run.text = line
            if style.font_size:
                run.font.size = Pt(style.font_size)
            if style.color:
                run.font.color.rgb = RGBColor.from_string(style.color)

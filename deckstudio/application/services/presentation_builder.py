"""
Presentation builder: binds slide content into master placeholder slots.

Two entry points share the same output type:

* ``bind_from_placeholder_data`` takes per-slide placeholder values keyed by
  master name (the generation form).
* ``bind_from_content_tree`` takes the generic slide content tree of a stored
  document (the export flow) and lays it onto the content master.

The builder performs no I/O; resolving image references into bytes is the
deck writer's job.
"""

from typing import Dict, Iterable, List

from deckstudio.domain.value_objects.deck import (
    BoundImage,
    BoundItem,
    BoundSlide,
    BoundText,
    Deck,
    Frame,
)
from deckstudio.domain.value_objects.master_template import MasterTemplate, SlotKind
from deckstudio.domain.value_objects.slide_content import (
    ImageNode,
    Slide,
    TextNode,
    walk,
)
from deckstudio.domain.value_objects.slide_data import ImageValue, SlideData
from deckstudio.infra.assets.master_registry import (
    BODY_PLACEHOLDER,
    DEFAULT_CONTENT_MASTER,
    MasterRegistry,
)
from deckstudio.infra.config.logging_config import get_logger

# Where content-tree images land; they are not tied to a named slot.
DEFAULT_IMAGE_FRAME = Frame(x=1.0, y=1.0, w=8.0, h=4.5)


class PresentationBuilder:
    def __init__(self, registry: MasterRegistry):
        self.registry = registry
        self._log = get_logger("service.presentation_builder")

    def bind_from_placeholder_data(self, slides_data: Iterable[SlideData]) -> Deck:
        """
        Bind each SlideData into its master, preserving input order.

        Image values go to image slots as images; every other combination
        binds as text. Keys the master does not define are ignored, and
        slots without data stay empty.

        Raises:
            MasterNotFoundError: If a slide names an unknown master.
        """
        masters: Dict[str, MasterTemplate] = {}
        slides: List[BoundSlide] = []

        for slide_data in slides_data:
            master = self.registry.resolve(slide_data.master_name)
            masters[master.name] = master

            items: List[BoundItem] = []
            for key, value in slide_data.data.items():
                slot = master.slot(key)
                if slot is None:
                    self._log.debug(
                        "builder.placeholder.ignored", master=master.name, key=key
                    )
                    continue
                if slot.kind == SlotKind.IMAGE and isinstance(value, ImageValue):
                    items.append(BoundImage(ref=value.ref, placeholder=key))
                else:
                    items.append(BoundText(placeholder=key, text=value.as_text()))

            slides.append(BoundSlide(master_name=master.name, items=tuple(items)))

        self._log.info("builder.bind.placeholder_data", slide_count=len(slides))
        return Deck(masters=masters, slides=tuple(slides))

    def bind_from_content_tree(self, slides: Iterable[Slide]) -> Deck:
        """
        Lay every slide onto the content master.

        Images anywhere in the tree are emitted as they are met, at a fixed
        frame. All text runs are gathered in traversal order, joined by line
        breaks and emitted last as one block in the body placeholder.
        """
        master = self.registry.resolve(DEFAULT_CONTENT_MASTER)
        bound: List[BoundSlide] = []

        for slide in slides:
            items: List[BoundItem] = []
            runs: List[str] = []

            for node in walk(slide.content):
                if isinstance(node, ImageNode):
                    items.append(BoundImage(ref=node.url, frame=DEFAULT_IMAGE_FRAME))
                elif isinstance(node, TextNode):
                    runs.append(node.text)

            text = "\n".join(runs).strip()
            if text:
                items.append(BoundText(placeholder=BODY_PLACEHOLDER, text=text))

            bound.append(BoundSlide(master_name=master.name, items=tuple(items)))

        self._log.info("builder.bind.content_tree", slide_count=len(bound))
        return Deck(masters={master.name: master}, slides=tuple(bound))

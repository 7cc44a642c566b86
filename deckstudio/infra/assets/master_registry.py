"""
Static registry of slide master templates.

Masters are defined once at import time and never change at runtime, so the
placeholder keys for a given master name are stable across requests.
Geometry is in inches on a 10 x 5.625 (16:9) canvas.
"""

from typing import Dict, List, Tuple

from deckstudio.domain.exceptions import MasterNotFoundError
from deckstudio.domain.value_objects.master_template import (
    MasterTemplate,
    PlaceholderSlot,
    SlotKind,
    SlotStyle,
)

SLIDE_WIDTH_IN = 10.0
SLIDE_HEIGHT_IN = 5.625
BACKGROUND = "F1F1F1"

TITLE_MASTER = MasterTemplate(
    name="TITLE_MASTER",
    background_color=BACKGROUND,
    slots=(
        PlaceholderSlot(
            key="titlePlaceholder",
            kind=SlotKind.TEXT,
            x=0.5, y=1.5, w=9.0, h=1.0,
            style=SlotStyle(font_size=36, color="333333", align="center"),
        ),
        PlaceholderSlot(
            key="subtitlePlaceholder",
            kind=SlotKind.TEXT,
            x=0.5, y=3.0, w=9.0, h=1.0,
            style=SlotStyle(font_size=24, color="555555", align="center"),
        ),
    ),
)

CONTENT_MASTER = MasterTemplate(
    name="CONTENT_MASTER",
    background_color=BACKGROUND,
    slots=(
        PlaceholderSlot(
            key="headerPlaceholder",
            kind=SlotKind.TEXT,
            x=0.5, y=0.5, w=9.0, h=1.0,
            style=SlotStyle(font_size=32, color="333333", align="center"),
        ),
        PlaceholderSlot(
            key="bodyPlaceholder",
            kind=SlotKind.TEXT,
            x=0.5, y=1.7, w=9.0, h=4.0,
            style=SlotStyle(font_size=18, color="444444", align="left", valign="top"),
        ),
    ),
)

IMAGE_MASTER = MasterTemplate(
    name="IMAGE_MASTER",
    background_color=BACKGROUND,
    slots=(
        PlaceholderSlot(
            key="headerPlaceholder",
            kind=SlotKind.TEXT,
            x=0.5, y=0.3, w=9.0, h=0.8,
            style=SlotStyle(font_size=28, color="333333", align="center"),
        ),
        PlaceholderSlot(
            key="imagePlaceholder",
            kind=SlotKind.IMAGE,
            x=1.0, y=1.2, w=8.0, h=3.6,
        ),
        PlaceholderSlot(
            key="captionPlaceholder",
            kind=SlotKind.TEXT,
            x=0.5, y=4.9, w=9.0, h=0.5,
            style=SlotStyle(font_size=14, color="555555", align="center"),
        ),
    ),
)

# Master every slide gets on the content-tree (export) path.
DEFAULT_CONTENT_MASTER = CONTENT_MASTER.name
BODY_PLACEHOLDER = "bodyPlaceholder"


class MasterRegistry:
    """Read-only lookup of master templates by symbolic name."""

    def __init__(self, masters: Tuple[MasterTemplate, ...]):
        self._masters: Dict[str, MasterTemplate] = {}
        for master in masters:
            if master.name in self._masters:
                raise ValueError(f"Duplicate master name: {master.name}")
            self._masters[master.name] = master

    def resolve(self, name: str) -> MasterTemplate:
        master = self._masters.get(name)
        if master is None:
            raise MasterNotFoundError(name)
        return master

    def __contains__(self, name: str) -> bool:
        return name in self._masters

    def names(self) -> List[str]:
        return list(self._masters)

    def all(self) -> Dict[str, MasterTemplate]:
        return dict(self._masters)


_registry = MasterRegistry((TITLE_MASTER, CONTENT_MASTER, IMAGE_MASTER))


def get_master_registry() -> MasterRegistry:
    """Shared registry instance (useful for dependency injection)."""
    return _registry

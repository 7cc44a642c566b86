"""
Deck: the fully bound, writer-ready result of the presentation builder.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

from deckstudio.domain.value_objects.master_template import MasterTemplate


@dataclass(frozen=True)
class Frame:
    """Free position for content not tied to a slot, in inches."""

    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class BoundText:
    placeholder: str
    text: str


@dataclass(frozen=True)
class BoundImage:
    ref: str
    placeholder: Optional[str] = None
    frame: Optional[Frame] = None


BoundItem = Union[BoundText, BoundImage]


@dataclass(frozen=True)
class BoundSlide:
    master_name: str
    items: Tuple[BoundItem, ...] = ()

    @property
    def texts(self) -> Tuple[BoundText, ...]:
        return tuple(item for item in self.items if isinstance(item, BoundText))

    @property
    def images(self) -> Tuple[BoundImage, ...]:
        return tuple(item for item in self.items if isinstance(item, BoundImage))


@dataclass(frozen=True)
class Deck:
    masters: Dict[str, MasterTemplate]
    slides: Tuple[BoundSlide, ...] = ()

    def __len__(self) -> int:
        return len(self.slides)

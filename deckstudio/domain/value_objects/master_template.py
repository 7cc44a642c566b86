"""
Master template value objects: named layouts of placeholder slots.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class SlotKind(str, Enum):
    TEXT = "text"
    IMAGE = "image"


@dataclass(frozen=True)
class SlotStyle:
    font_size: Optional[int] = None
    color: Optional[str] = None
    align: Optional[str] = None  # left | center | right
    valign: Optional[str] = None  # top | middle | bottom


@dataclass(frozen=True)
class PlaceholderSlot:
    """A positioned region of a master. Geometry is in inches."""

    key: str
    kind: SlotKind
    x: float
    y: float
    w: float
    h: float
    style: SlotStyle = field(default_factory=SlotStyle)


@dataclass(frozen=True)
class MasterTemplate:
    name: str
    slots: Tuple[PlaceholderSlot, ...]
    background_color: str = "FFFFFF"

    def __post_init__(self):
        keys = [slot.key for slot in self.slots]
        duplicates = sorted({key for key in keys if keys.count(key) > 1})
        if duplicates:
            raise ValueError(
                f"Master {self.name} has duplicate placeholder keys: {duplicates}"
            )

    @property
    def placeholder_keys(self) -> Tuple[str, ...]:
        return tuple(slot.key for slot in self.slots)

    def slot(self, key: str) -> Optional[PlaceholderSlot]:
        for slot in self.slots:
            if slot.key == key:
                return slot
        return None

"""
Domain value objects - immutable objects that represent concepts.
"""

from .document_type import DocumentType
from .image_model import ImageModel
from .listing import ListScope, Page
from .master_template import MasterTemplate, PlaceholderSlot, SlotKind, SlotStyle
from .slide_content import ContainerNode, ImageNode, Slide, TextNode
from .slide_data import ImageValue, SlideData, TextValue
from .deck import BoundImage, BoundSlide, BoundText, Deck, Frame

__all__ = [
    "DocumentType",
    "ImageModel",
    "ListScope",
    "Page",
    "MasterTemplate",
    "PlaceholderSlot",
    "SlotKind",
    "SlotStyle",
    "ContainerNode",
    "ImageNode",
    "Slide",
    "TextNode",
    "ImageValue",
    "SlideData",
    "TextValue",
    "BoundImage",
    "BoundSlide",
    "BoundText",
    "Deck",
    "Frame",
]

"""
Document type value object.
"""

from enum import Enum


class DocumentType(str, Enum):
    PRESENTATION = "presentation"
    DOCUMENT = "document"

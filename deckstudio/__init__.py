"""Deck Studio: presentation generation, storage and PPTX export."""

__version__ = "1.0.0"

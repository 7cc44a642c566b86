"""
SQLAlchemy model for generated images.
"""

import uuid

from sqlalchemy import Column, DateTime, String, Text

from deckstudio.data.models.base import Base, utcnow


class GeneratedImageModel(Base):
    __tablename__ = "generated_images"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    url = Column(String(2048), nullable=False)
    prompt = Column(Text, nullable=False)
    owner_id = Column(String(64), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

"""
SQLAlchemy model for uploaded presentation templates.
"""

import uuid

from sqlalchemy import Column, DateTime, String, Text

from deckstudio.data.models.base import Base, utcnow


class TemplateUploadModel(Base):
    __tablename__ = "presentation_templates"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    filename = Column(String(500), nullable=False)
    stored_file = Column(String(1024), nullable=False)
    owner_id = Column(String(64), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

"""
SQLAlchemy models for presentation documents and their content.
"""

import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, JSON, String
from sqlalchemy.orm import relationship

from deckstudio.data.models.base import Base, utcnow


class BaseDocumentModel(Base):
    __tablename__ = "base_documents"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(500), nullable=False)
    document_type = Column(String(20), nullable=False, default="presentation")
    is_public = Column(Boolean, nullable=False, default=False)
    owner_id = Column(String(64), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    # Relationships
    presentation = relationship(
        "PresentationModel",
        back_populates="document",
        uselist=False,
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    __table_args__ = (
        Index("idx_base_documents_listing", "document_type", "is_public", "updated_at"),
    )


class PresentationModel(Base):
    __tablename__ = "presentations"

    id = Column(
        String(36),
        ForeignKey("base_documents.id", ondelete="CASCADE"),
        primary_key=True,
    )
    content = Column(JSON, nullable=False)
    theme = Column(String(100), nullable=False, default="default")
    outline = Column(JSON, nullable=True)
    image_model = Column(String(50), nullable=True)
    presentation_style = Column(String(100), nullable=True)
    language = Column(String(50), nullable=True)
    template_used_id = Column(String(36), nullable=True)
    generated_file_path = Column(String(1024), nullable=True)

    document = relationship("BaseDocumentModel", back_populates="presentation")

"""
Declarative base for all SQLAlchemy models.
"""

from datetime import datetime, UTC

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def utcnow() -> datetime:
    return datetime.now(UTC)

"""
Uploaded presentation template entity.
"""

from dataclasses import dataclass, field
from datetime import datetime, UTC
from typing import Optional
from uuid import uuid4


@dataclass
class TemplateUpload:
    name: str
    filename: str
    stored_file: str
    description: Optional[str] = None
    owner_id: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

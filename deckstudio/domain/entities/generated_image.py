"""
Generated image entity.
"""

from dataclasses import dataclass, field
from datetime import datetime, UTC
from typing import Optional
from uuid import uuid4


@dataclass
class GeneratedImage:
    url: str
    prompt: str
    owner_id: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

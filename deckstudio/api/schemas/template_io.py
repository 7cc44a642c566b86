"""
Template upload and master listing schemas.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from deckstudio.domain.entities.template_upload import TemplateUpload
from deckstudio.domain.value_objects.master_template import MasterTemplate

from .base import BaseResponse


class SlotOut(BaseModel):
    key: str
    kind: str
    x: float
    y: float
    w: float
    h: float


class MasterOut(BaseModel):
    name: str
    background_color: str
    slots: List[SlotOut]

    @classmethod
    def from_master(cls, master: MasterTemplate) -> "MasterOut":
        return cls(
            name=master.name,
            background_color=master.background_color,
            slots=[
                SlotOut(
                    key=slot.key,
                    kind=slot.kind.value,
                    x=slot.x,
                    y=slot.y,
                    w=slot.w,
                    h=slot.h,
                )
                for slot in master.slots
            ],
        )


class MastersResponse(BaseResponse):
    masters: List[MasterOut]


class TemplateOut(BaseModel):
    id: str
    name: str
    filename: str
    stored_file: str
    description: Optional[str] = None
    owner_id: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, template: TemplateUpload) -> "TemplateOut":
        return cls(
            id=template.id,
            name=template.name,
            filename=template.filename,
            stored_file=template.stored_file,
            description=template.description,
            owner_id=template.owner_id,
            created_at=template.created_at,
        )


class TemplateUploadResponse(BaseResponse):
    template: TemplateOut

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from card_service.domain.value_objects.enums import Role

_camel = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SendCardRequest(BaseModel):
    sender_role: Role
    card_type: str
    title: str
    icon: str
    message: str = ""

    model_config = _camel

    @field_validator("message", mode="before")
    @classmethod
    def _null_message(cls, v: str | None) -> str:
        return "" if v is None else v


class CardResponse(BaseModel):
    id: UUID
    sender_role: Role
    receiver_role: Role
    card_type: str
    title: str
    icon: str
    message: str
    timestamp: datetime
    is_read: bool

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class UnreadCountResponse(BaseModel):
    count: int

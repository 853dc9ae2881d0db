from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from uuid import UUID

from card_service.domain.value_objects.enums import Role


@dataclass(frozen=True, slots=True)
class Card:
    id: UUID | None
    sender_role: Role
    receiver_role: Role
    card_type: str
    title: str
    icon: str
    message: str
    timestamp: datetime
    is_read: bool = False

    @classmethod
    def compose(
        cls,
        sender_role: Role,
        card_type: str,
        title: str,
        icon: str,
        message: str | None,
        timestamp: datetime,
    ) -> Card:
        """Build an unsaved, unread card addressed to the sender's partner."""
        return cls(
            id=None,
            sender_role=sender_role,
            receiver_role=sender_role.partner,
            card_type=card_type,
            title=title,
            icon=icon,
            message=message or "",
            timestamp=timestamp,
            is_read=False,
        )

    def mark_read(self) -> Card:
        if self.is_read:
            return self
        return replace(self, is_read=True)

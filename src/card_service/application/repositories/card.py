from __future__ import annotations

from typing import Iterable, Protocol
from uuid import UUID

from card_service.domain.entities.card import Card
from card_service.domain.value_objects.enums import Role


class CardReader(Protocol):
    async def get_by_id(self, card_id: UUID) -> Card | None: ...

    async def list_by_receiver(self, receiver_role: Role) -> list[Card]:
        """All cards addressed to receiver_role, newest first."""
        ...

    async def list_unread_by_receiver(self, receiver_role: Role) -> list[Card]:
        """Unread cards addressed to receiver_role, newest first."""
        ...

    async def count_unread_by_receiver(self, receiver_role: Role) -> int: ...


class CardWriter(Protocol):
    async def insert(self, card: Card) -> Card:
        """Persist a new card. Returns it with the storage-assigned id."""
        ...

    async def save_all(self, cards: Iterable[Card]) -> None:
        """Bulk upsert by id. The stored is_read flag never goes back to false."""
        ...

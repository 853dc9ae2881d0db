"""Shared test fixtures."""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import Iterable
from uuid import UUID

import pytest

from card_service.domain.entities.card import Card
from card_service.domain.value_objects.enums import Role

BASE_TIME = datetime(2026, 2, 14, 9, 30, 0)


def make_card(
    *,
    sender_role: Role = Role.XIAO_HUANG,
    card_type: str = "hug",
    title: str = "Hug",
    icon: str = "heart",
    message: str = "",
    timestamp: datetime | None = None,
    is_read: bool = False,
) -> Card:
    return Card(
        id=uuid.uuid4(),
        sender_role=sender_role,
        receiver_role=sender_role.partner,
        card_type=card_type,
        title=title,
        icon=icon,
        message=message,
        timestamp=timestamp or BASE_TIME,
        is_read=is_read,
    )


class SteppingClock:
    """Deterministic clock that advances by one minute on every call."""

    def __init__(self, start: datetime = BASE_TIME) -> None:
        self._next = start

    def now(self) -> datetime:
        current = self._next
        self._next += timedelta(minutes=1)
        return current


@dataclass
class FakeCardReader:
    _store: dict[UUID, Card] = field(default_factory=dict)

    def _newest_first(self, cards: Iterable[Card]) -> list[Card]:
        return sorted(cards, key=lambda c: (c.timestamp, c.id), reverse=True)

    async def get_by_id(self, card_id: UUID) -> Card | None:
        return self._store.get(card_id)

    async def list_by_receiver(self, receiver_role: Role) -> list[Card]:
        return self._newest_first(
            c for c in self._store.values() if c.receiver_role == receiver_role
        )

    async def list_unread_by_receiver(self, receiver_role: Role) -> list[Card]:
        return self._newest_first(
            c for c in self._store.values()
            if c.receiver_role == receiver_role and not c.is_read
        )

    async def count_unread_by_receiver(self, receiver_role: Role) -> int:
        return len(await self.list_unread_by_receiver(receiver_role))


@dataclass
class FakeCardWriter:
    _reader: FakeCardReader
    _save_all_calls: list[list[Card]] = field(default_factory=list)

    async def insert(self, card: Card) -> Card:
        stored = replace(card, id=uuid.uuid4())
        self._reader._store[stored.id] = stored
        return stored

    async def save_all(self, cards: Iterable[Card]) -> None:
        batch = list(cards)
        self._save_all_calls.append(batch)
        for card in batch:
            existing = self._reader._store.get(card.id)
            if existing is not None and existing.is_read:
                card = replace(card, is_read=True)
            self._reader._store[card.id] = card


@dataclass
class FakeUoW:
    """In-memory UoW for unit tests."""
    cards: FakeCardReader = field(default_factory=FakeCardReader)
    cards_w: FakeCardWriter | None = None
    _commits: int = 0

    def __post_init__(self) -> None:
        if self.cards_w is None:
            self.cards_w = FakeCardWriter(self.cards)

    def add(self, *cards: Card) -> None:
        for card in cards:
            self.cards._store[card.id] = card

    async def flush(self) -> None:
        pass

    async def commit(self) -> None:
        self._commits += 1

    async def rollback(self) -> None:
        pass


@pytest.fixture
def uow() -> FakeUoW:
    return FakeUoW()


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock()

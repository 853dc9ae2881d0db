from __future__ import annotations

from typing import Protocol

from card_service.application.repositories.card import CardReader, CardWriter


class UnitOfWork(Protocol):
    cards: CardReader
    cards_w: CardWriter

    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...
    async def flush(self) -> None: ...

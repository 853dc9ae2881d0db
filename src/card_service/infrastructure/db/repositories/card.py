from __future__ import annotations

from typing import Iterable
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from card_service.domain.entities.card import Card
from card_service.domain.value_objects.enums import Role
from card_service.infrastructure.db.mappers import card as mapper
from card_service.infrastructure.db.models.card import CardModel

_NEWEST_FIRST = (CardModel.timestamp.desc(), CardModel.id.desc())


class CardReaderRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, card_id: UUID) -> Card | None:
        model = await self._session.get(CardModel, card_id)
        return mapper.model_to_entity(model) if model else None

    async def list_by_receiver(self, receiver_role: Role) -> list[Card]:
        stmt = (
            select(CardModel)
            .where(CardModel.receiver_role == receiver_role.value)
            .order_by(*_NEWEST_FIRST)
        )
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]

    async def list_unread_by_receiver(self, receiver_role: Role) -> list[Card]:
        stmt = (
            select(CardModel)
            .where(
                CardModel.receiver_role == receiver_role.value,
                CardModel.is_read.is_(False),
            )
            .order_by(*_NEWEST_FIRST)
        )
        result = await self._session.execute(stmt)
        return [mapper.model_to_entity(m) for m in result.scalars().all()]

    async def count_unread_by_receiver(self, receiver_role: Role) -> int:
        stmt = select(func.count()).select_from(CardModel).where(
            CardModel.receiver_role == receiver_role.value,
            CardModel.is_read.is_(False),
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()


class CardWriterRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert(self, card: Card) -> Card:
        stmt = (
            pg_insert(CardModel)
            .values(**mapper.entity_to_values(card))
            .returning(CardModel)
        )
        result = await self._session.execute(stmt)
        return mapper.model_to_entity(result.scalar_one())

    async def save_all(self, cards: Iterable[Card]) -> None:
        rows = [mapper.entity_to_values(c) for c in cards]
        if not rows:
            return

        stmt = pg_insert(CardModel).values(rows)
        # Only the read flag is mutable, and it is sticky once set.
        stmt = stmt.on_conflict_do_update(
            index_elements=[CardModel.id],
            set_={"is_read": or_(CardModel.is_read, stmt.excluded.is_read)},
        )
        await self._session.execute(stmt)

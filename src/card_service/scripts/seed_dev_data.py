"""Seed development data: a handful of cards in both directions."""
from __future__ import annotations

import asyncio
import logging

from card_service.domain.value_objects.enums import Role
from card_service.infrastructure.db.session import AsyncSessionLocal, engine
from card_service.infrastructure.db.uow import SqlAlchemyUoW
from card_service.logging_setup import configure_logging
from card_service.services import interaction_service

logger = logging.getLogger(__name__)

SAMPLE_CARDS = [
    (Role.XIAO_ZHANG, "hug", "抱抱", "heart.fill", "今天辛苦啦"),
    (Role.XIAO_ZHANG, "drink", "奶茶", "cup.and.saucer.fill", ""),
    (Role.XIAO_HUANG, "miss", "想你", "sparkles", "早点回家"),
    (Role.XIAO_HUANG, "food", "投喂", "fork.knife", ""),
]


async def seed() -> None:
    try:
        async with AsyncSessionLocal() as session:
            uow = SqlAlchemyUoW(session)
            for sender, card_type, title, icon, message in SAMPLE_CARDS:
                await interaction_service.send_card(
                    sender, card_type, title, icon, message, uow,
                )
        logger.info("Seeded %d cards", len(SAMPLE_CARDS))
    finally:
        await engine.dispose()


def main() -> None:
    configure_logging()
    asyncio.run(seed())


if __name__ == "__main__":
    main()

"""Create the database schema for the card service."""
from __future__ import annotations

import asyncio
import logging

from sqlalchemy.exc import SQLAlchemyError

from card_service.infrastructure.db import models  # noqa: F401  # register tables on Base.metadata
from card_service.infrastructure.db.base import Base
from card_service.infrastructure.db.session import engine
from card_service.logging_setup import configure_logging

logger = logging.getLogger(__name__)


async def create_all() -> None:
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Created tables: %s", ", ".join(sorted(Base.metadata.tables)))
    finally:
        await engine.dispose()


def main() -> None:
    configure_logging()
    try:
        asyncio.run(create_all())
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc


if __name__ == "__main__":
    main()

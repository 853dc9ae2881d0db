from __future__ import annotations

import logging
import uuid

from card_service.application.exceptions import ValidationError
from card_service.application.ports.clock import Clock, SystemClock
from card_service.application.uow import UnitOfWork
from card_service.domain.entities.card import Card
from card_service.domain.value_objects.enums import Role

logger = logging.getLogger(__name__)

_system_clock = SystemClock()


async def send_card(
    sender_role: Role | str,
    card_type: str,
    title: str,
    icon: str,
    message: str | None,
    uow: UnitOfWork,
    clock: Clock = _system_clock,
) -> Card:
    """Create an unread card from sender_role to its partner.

    Raises ValidationError for a role outside the two known identities,
    before anything is written.
    """
    try:
        sender = Role(sender_role)
    except ValueError as exc:
        raise ValidationError(f"Unknown sender role: {sender_role!r}") from exc

    card = Card.compose(sender, card_type, title, icon, message, clock.now())

    card = await uow.cards_w.insert(card)
    await uow.commit()

    logger.info(
        "Card %s (%s) sent %s -> %s",
        card.id, card.card_type, card.sender_role, card.receiver_role,
    )
    return card


async def get_received_cards(receiver_role: Role, uow: UnitOfWork) -> list[Card]:
    return await uow.cards.list_by_receiver(receiver_role)


async def get_unread_cards(receiver_role: Role, uow: UnitOfWork) -> list[Card]:
    return await uow.cards.list_unread_by_receiver(receiver_role)


async def get_unread_count(receiver_role: Role, uow: UnitOfWork) -> int:
    return await uow.cards.count_unread_by_receiver(receiver_role)


async def mark_as_read(card_id: uuid.UUID, uow: UnitOfWork) -> Card | None:
    """Flip one card to read. Returns None when no card has this id."""
    card = await uow.cards.get_by_id(card_id)
    if card is None:
        return None

    card = card.mark_read()
    await uow.cards_w.save_all([card])
    await uow.commit()
    return card


async def mark_all_as_read(receiver_role: Role, uow: UnitOfWork) -> int:
    """Flip every unread card of receiver_role in one bulk write.

    Returns the number of cards flipped.
    """
    unread = await uow.cards.list_unread_by_receiver(receiver_role)
    if not unread:
        return 0

    await uow.cards_w.save_all([c.mark_read() for c in unread])
    await uow.commit()

    logger.info("Marked %d card(s) read for %s", len(unread), receiver_role)
    return len(unread)

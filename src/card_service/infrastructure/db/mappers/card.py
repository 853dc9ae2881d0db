from __future__ import annotations

from card_service.domain.entities.card import Card
from card_service.domain.value_objects.enums import Role
from card_service.infrastructure.db.models.card import CardModel


def model_to_entity(model: CardModel) -> Card:
    return Card(
        id=model.id,
        sender_role=Role(model.sender_role),
        receiver_role=Role(model.receiver_role),
        card_type=model.card_type,
        title=model.title,
        icon=model.icon,
        message=model.message,
        timestamp=model.timestamp,
        is_read=model.is_read,
    )


def entity_to_values(entity: Card) -> dict:
    """Column values for an insert/upsert. The id is left to storage when unset."""
    values = {
        "sender_role": entity.sender_role.value,
        "receiver_role": entity.receiver_role.value,
        "card_type": entity.card_type,
        "title": entity.title,
        "icon": entity.icon,
        "message": entity.message,
        "timestamp": entity.timestamp,
        "is_read": entity.is_read,
    }
    if entity.id is not None:
        values["id"] = entity.id
    return values

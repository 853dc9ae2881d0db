"""Import all models so Base.metadata sees them."""
from card_service.infrastructure.db.models.card import CardModel

__all__ = [
    "CardModel",
]

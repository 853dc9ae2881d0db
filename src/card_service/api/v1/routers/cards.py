from __future__ import annotations

import uuid

from fastapi import APIRouter, Response, status

from card_service.api.deps import UoWDep
from card_service.api.v1.schemas.card import (
    CardResponse,
    SendCardRequest,
    UnreadCountResponse,
)
from card_service.domain.value_objects.enums import Role
from card_service.services import interaction_service

router = APIRouter(prefix="/api/cards", tags=["cards"])


@router.post("", response_model=CardResponse)
async def send_card(body: SendCardRequest, uow: UoWDep) -> CardResponse:
    card = await interaction_service.send_card(
        body.sender_role,
        body.card_type,
        body.title,
        body.icon,
        body.message,
        uow,
    )
    return CardResponse.model_validate(card, from_attributes=True)


@router.get("/{receiver_role}", response_model=list[CardResponse])
async def get_received_cards(receiver_role: Role, uow: UoWDep) -> list[CardResponse]:
    cards = await interaction_service.get_received_cards(receiver_role, uow)
    return [CardResponse.model_validate(c, from_attributes=True) for c in cards]


@router.get("/{receiver_role}/unread", response_model=list[CardResponse])
async def get_unread_cards(receiver_role: Role, uow: UoWDep) -> list[CardResponse]:
    cards = await interaction_service.get_unread_cards(receiver_role, uow)
    return [CardResponse.model_validate(c, from_attributes=True) for c in cards]


@router.get("/{receiver_role}/unread-count", response_model=UnreadCountResponse)
async def get_unread_count(receiver_role: Role, uow: UoWDep) -> UnreadCountResponse:
    count = await interaction_service.get_unread_count(receiver_role, uow)
    return UnreadCountResponse(count=count)


@router.put(
    "/{card_id}/read",
    response_model=CardResponse,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Card not found"}},
)
async def mark_as_read(card_id: str, uow: UoWDep) -> CardResponse | Response:
    try:
        parsed_id = uuid.UUID(card_id)
    except ValueError:
        # An id that can't be a card id is just an unknown card.
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    card = await interaction_service.mark_as_read(parsed_id, uow)
    if card is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return CardResponse.model_validate(card, from_attributes=True)


@router.put("/{receiver_role}/read-all", response_class=Response)
async def mark_all_as_read(receiver_role: Role, uow: UoWDep) -> Response:
    await interaction_service.mark_all_as_read(receiver_role, uow)
    return Response(status_code=status.HTTP_200_OK)

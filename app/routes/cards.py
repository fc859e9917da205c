"""Card routes."""
import uuid
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.security import get_current_user
from app.db.sessions import get_db
from app.models.user import User
from app.schemas.auth import MessageResponse
from app.schemas.card import CardCreate, CardMove, CardResponse, CardUpdate
from app.services.card_service import CardService


router = APIRouter(prefix="/cards", tags=["Cards"])


def get_card_service(db: Session = Depends(get_db)) -> CardService:
    return CardService(db)


@router.post("/list/{list_id}", response_model=CardResponse, status_code=status.HTTP_201_CREATED)
def create_card(
    list_id: uuid.UUID,
    request: CardCreate,
    current_user: User = Depends(get_current_user),
    card_service: CardService = Depends(get_card_service)
):
    return card_service.create(list_id, request, current_user.id)


@router.get("/list/{list_id}", response_model=List[CardResponse])
def list_cards(
    list_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    card_service: CardService = Depends(get_card_service)
):
    return card_service.find_by_list(list_id, current_user.id)


@router.get("/{card_id}", response_model=CardResponse)
def get_card(
    card_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    card_service: CardService = Depends(get_card_service)
):
    return card_service.find_one(card_id, current_user.id)


@router.patch("/{card_id}", response_model=CardResponse)
def update_card(
    card_id: uuid.UUID,
    request: CardUpdate,
    current_user: User = Depends(get_current_user),
    card_service: CardService = Depends(get_card_service)
):
    """
    Patch a card.

    Sending a different ``list_id`` moves the card to that list.
    """
    return card_service.update(card_id, request, current_user.id)


@router.put("/{card_id}/move", response_model=CardResponse)
def move_card(
    card_id: uuid.UUID,
    request: CardMove,
    current_user: User = Depends(get_current_user),
    card_service: CardService = Depends(get_card_service)
):
    """Move a card to another list, at the end unless a position is given."""
    return card_service.move_card(card_id, request.list_id, current_user.id, request.position)


@router.delete("/{card_id}", response_model=MessageResponse)
def delete_card(
    card_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    card_service: CardService = Depends(get_card_service)
):
    return card_service.remove(card_id, current_user.id)

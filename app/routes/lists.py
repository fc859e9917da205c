"""List routes."""
import uuid
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.security import get_current_user
from app.db.sessions import get_db
from app.models.user import User
from app.schemas.auth import MessageResponse
from app.schemas.board_list import ListCreate, ListResponse, ListUpdate
from app.services.list_service import ListService


router = APIRouter(prefix="/lists", tags=["Lists"])


def get_list_service(db: Session = Depends(get_db)) -> ListService:
    return ListService(db)


@router.post("/board/{board_id}", response_model=ListResponse, status_code=status.HTTP_201_CREATED)
def create_list(
    board_id: uuid.UUID,
    request: ListCreate,
    current_user: User = Depends(get_current_user),
    list_service: ListService = Depends(get_list_service)
):
    """
    Create a list on a board.

    Without an explicit position the list is appended after the last one.
    """
    return list_service.create(board_id, request, current_user.id)


@router.get("/board/{board_id}", response_model=List[ListResponse])
def list_lists(
    board_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    list_service: ListService = Depends(get_list_service)
):
    """Lists of a board in position order, each with its cards."""
    return list_service.find_by_board(board_id, current_user.id)


@router.get("/{list_id}", response_model=ListResponse)
def get_list(
    list_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    list_service: ListService = Depends(get_list_service)
):
    return list_service.find_one(list_id, current_user.id)


@router.patch("/{list_id}", response_model=ListResponse)
def update_list(
    list_id: uuid.UUID,
    request: ListUpdate,
    current_user: User = Depends(get_current_user),
    list_service: ListService = Depends(get_list_service)
):
    return list_service.update(list_id, request, current_user.id)


@router.delete("/{list_id}", response_model=MessageResponse)
def delete_list(
    list_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    list_service: ListService = Depends(get_list_service)
):
    return list_service.remove(list_id, current_user.id)

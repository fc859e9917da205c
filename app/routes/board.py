"""Board routes."""
import uuid
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.security import get_current_user
from app.db.sessions import get_db
from app.models.user import User
from app.schemas.auth import MessageResponse
from app.schemas.board import BoardCreate, BoardResponse, BoardUpdate
from app.services.board_service import BoardService


router = APIRouter(prefix="/board", tags=["Boards"])


def get_board_service(db: Session = Depends(get_db)) -> BoardService:
    return BoardService(db)


@router.post("", response_model=BoardResponse, status_code=status.HTTP_201_CREATED)
def create_board(
    request: BoardCreate,
    current_user: User = Depends(get_current_user),
    board_service: BoardService = Depends(get_board_service)
):
    return board_service.create(current_user.id, request)


@router.get("", response_model=List[BoardResponse])
def list_boards(
    current_user: User = Depends(get_current_user),
    board_service: BoardService = Depends(get_board_service)
):
    """List all boards owned by the current user."""
    return board_service.find_belongs_to_user(current_user.id)


@router.get("/{board_id}", response_model=BoardResponse)
def get_board(
    board_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    board_service: BoardService = Depends(get_board_service)
):
    """
    Get a board by ID.

    Boards owned by someone else are reported as not found.
    """
    return board_service.find_one(board_id, current_user.id)


@router.put("/{board_id}", response_model=BoardResponse)
def update_board(
    board_id: uuid.UUID,
    request: BoardUpdate,
    current_user: User = Depends(get_current_user),
    board_service: BoardService = Depends(get_board_service)
):
    return board_service.update(board_id, request, current_user.id)


@router.delete("/{board_id}", response_model=MessageResponse)
def delete_board(
    board_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    board_service: BoardService = Depends(get_board_service)
):
    """
    Delete a board.

    Cascades to all lists and cards of the board.
    """
    return board_service.remove(board_id, current_user.id)

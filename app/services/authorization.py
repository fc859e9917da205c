"""Ownership checks along the card -> list -> board -> user chain.

Every list and card operation goes through one of these guards before it
touches the resource. They only read.
"""
from sqlalchemy.orm import Session, joinedload

from app.core.exceptions import AccessDeniedError, NotFoundError
from app.models import Board, BoardList, Card


class AuthorizationService:
    def __init__(self, db: Session):
        self.db = db

    def verify_board_ownership(self, board_id, user_id) -> Board:
        board = self.db.query(Board).filter(
            Board.id == board_id,
            Board.user_id == user_id
        ).first()

        if board is None:
            raise AccessDeniedError("Access denied - Board not found or unauthorized")
        return board

    def verify_list_ownership(self, list_id, user_id) -> BoardList:
        board_list = self.db.query(BoardList).options(
            joinedload(BoardList.board)
        ).filter(BoardList.id == list_id).first()

        if board_list is None:
            raise NotFoundError(f"List with ID {list_id} not found")
        if board_list.board.user_id != user_id:
            raise AccessDeniedError("Access denied - List does not belong to user")
        return board_list

    def verify_card_ownership(self, card_id, user_id) -> Card:
        """Load the card with its list and board in one query and check the owner.

        Returns the card so callers do not need a second fetch.
        """
        card = self.db.query(Card).options(
            joinedload(Card.list).joinedload(BoardList.board)
        ).filter(Card.id == card_id).first()

        if card is None:
            raise NotFoundError(f"Card with ID {card_id} not found")
        if card.list.board.user_id != user_id:
            raise AccessDeniedError("Access denied - Card does not belong to user")
        return card

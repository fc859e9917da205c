"""Database models."""
from app.models.user import User
from app.models.board import Board
from app.models.board_list import BoardList
from app.models.card import Card

__all__ = [
    "User",
    "Board",
    "BoardList",
    "Card",
]

"""Board CRUD scoped to the owning user."""
import logging
from typing import Dict, List

from app.core.exceptions import NotFoundError
from app.models import Board
from app.schemas.board import BoardCreate, BoardUpdate
from app.services.base import BaseService

logger = logging.getLogger(__name__)


class BoardService(BaseService):
    """Every query here filters on ``user_id``, so a foreign board looks absent."""

    def create(self, user_id, data: BoardCreate) -> Board:
        with self.handle_database_operation("Failed to create board"):
            board = Board(user_id=user_id, **data.model_dump(exclude_none=True))
            self.db.add(board)
            self.db.commit()
            self.db.refresh(board)

        logger.info("Created board %s for user %s", board.id, user_id)
        return board

    def find_belongs_to_user(self, user_id) -> List[Board]:
        with self.handle_database_operation("Failed to find boards"):
            return self.db.query(Board).filter(
                Board.user_id == user_id
            ).order_by(Board.created_at).all()

    def find_one(self, board_id, user_id) -> Board:
        with self.handle_database_operation("Failed to find board"):
            board = self.db.query(Board).filter(
                Board.id == board_id,
                Board.user_id == user_id
            ).first()

        if board is None:
            raise NotFoundError(f"Board with ID {board_id} not found")
        return board

    def update(self, board_id, data: BoardUpdate, user_id) -> Board:
        changes = self.patch_values(data, required=("name",))

        with self.handle_database_operation("Failed to update board"):
            scoped = self.db.query(Board).filter(
                Board.id == board_id,
                Board.user_id == user_id
            )
            affected = scoped.update(changes) if changes else scoped.count()
            if affected == 0:
                raise NotFoundError(f"Board with ID {board_id} not found")
            self.db.commit()

        return self.find_one(board_id, user_id)

    def remove(self, board_id, user_id) -> Dict[str, str]:
        """Delete a board and, through the FK cascade, its lists and cards.

        A board that is missing or belongs to someone else is reported in the
        message instead of raising, so repeated deletes are harmless.
        """
        with self.handle_database_operation("Failed to remove board"):
            affected = self.db.query(Board).filter(
                Board.id == board_id,
                Board.user_id == user_id
            ).delete()
            self.db.commit()

        if affected == 0:
            return {"message": "Board not found or access denied"}

        logger.info("Removed board %s", board_id)
        return {"message": "Board removed successfully"}

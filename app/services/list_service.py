"""List CRUD, gated on ownership of the parent board."""
import logging
from typing import Dict, List, Optional

from sqlalchemy.orm import Session, selectinload

from app.core.exceptions import NotFoundError
from app.models import Board, BoardList
from app.schemas.board_list import ListCreate, ListUpdate
from app.services.authorization import AuthorizationService
from app.services.base import BaseService
from app.services.position import PositionService

logger = logging.getLogger(__name__)


class ListService(BaseService):
    def __init__(
        self,
        db: Session,
        authorization: Optional[AuthorizationService] = None,
        positions: Optional[PositionService] = None,
    ):
        super().__init__(db)
        self.authorization = authorization or AuthorizationService(db)
        self.positions = positions or PositionService(db)

    def create(self, board_id, data: ListCreate, user_id) -> BoardList:
        self.authorization.verify_board_ownership(board_id, user_id)

        with self.handle_database_operation("Failed to create list"):
            position = data.position
            if position is None:
                self.positions.lock_parent(Board, board_id)
                position = self.positions.get_next_position(BoardList, board_id=board_id)

            board_list = BoardList(board_id=board_id, name=data.name, position=position)
            self.db.add(board_list)
            self.db.commit()
            self.db.refresh(board_list)

        logger.info("Created list %s on board %s at position %d", board_list.id, board_id, position)
        return board_list

    def find_by_board(self, board_id, user_id) -> List[BoardList]:
        self.authorization.verify_board_ownership(board_id, user_id)

        with self.handle_database_operation("Failed to find lists"):
            return self.db.query(BoardList).options(
                selectinload(BoardList.cards)
            ).filter(
                BoardList.board_id == board_id
            ).order_by(BoardList.position).all()

    def find_one(self, list_id, user_id) -> BoardList:
        return self.authorization.verify_list_ownership(list_id, user_id)

    def update(self, list_id, data: ListUpdate, user_id) -> BoardList:
        self.find_one(list_id, user_id)
        changes = self.patch_values(data, required=("name", "position"))

        with self.handle_database_operation("Failed to update list"):
            scoped = self.db.query(BoardList).filter(BoardList.id == list_id)
            affected = scoped.update(changes) if changes else scoped.count()
            if affected == 0:
                raise NotFoundError(f"List with ID {list_id} not found")
            self.db.commit()

        return self.find_one(list_id, user_id)

    def remove(self, list_id, user_id) -> Dict[str, str]:
        self.find_one(list_id, user_id)

        with self.handle_database_operation("Failed to remove list"):
            affected = self.db.query(BoardList).filter(BoardList.id == list_id).delete()
            if affected == 0:
                raise NotFoundError(f"List with ID {list_id} not found")
            self.db.commit()

        logger.info("Removed list %s", list_id)
        return {"message": "List removed successfully"}

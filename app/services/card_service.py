"""Card CRUD and moves between lists."""
import logging
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.models import BoardList, Card
from app.schemas.card import CardCreate, CardUpdate
from app.services.authorization import AuthorizationService
from app.services.base import BaseService
from app.services.position import PositionService

logger = logging.getLogger(__name__)


class CardService(BaseService):
    def __init__(
        self,
        db: Session,
        authorization: Optional[AuthorizationService] = None,
        positions: Optional[PositionService] = None,
    ):
        super().__init__(db)
        self.authorization = authorization or AuthorizationService(db)
        self.positions = positions or PositionService(db)

    def _next_position_in(self, list_id) -> int:
        self.positions.lock_parent(BoardList, list_id)
        return self.positions.get_next_position(Card, list_id=list_id)

    def create(self, list_id, data: CardCreate, user_id) -> Card:
        self.authorization.verify_list_ownership(list_id, user_id)
        due_date = self.positions.convert_date_if_provided(data.due_date)

        with self.handle_database_operation("Failed to create card"):
            values = data.model_dump(exclude_none=True)
            if values.get("position") is None:
                values["position"] = self._next_position_in(list_id)
            values["due_date"] = due_date

            card = Card(list_id=list_id, **values)
            self.db.add(card)
            self.db.commit()
            self.db.refresh(card)

        logger.info("Created card %s in list %s at position %d", card.id, list_id, card.position)
        return card

    def find_by_list(self, list_id, user_id) -> List[Card]:
        self.authorization.verify_list_ownership(list_id, user_id)

        with self.handle_database_operation("Failed to find cards"):
            return self.db.query(Card).filter(
                Card.list_id == list_id
            ).order_by(Card.position).all()

    def find_one(self, card_id, user_id) -> Card:
        return self.authorization.verify_card_ownership(card_id, user_id)

    def update(self, card_id, data: CardUpdate, user_id) -> Card:
        """Patch a card.

        Changing ``list_id`` relists the card: the target list must belong to
        the caller too and, unless a position is given, the card goes to the
        end of the target list.
        """
        card = self.authorization.verify_card_ownership(card_id, user_id)
        changes = self.patch_values(data, required=("title", "position", "list_id"))
        if "due_date" in changes:
            changes["due_date"] = self.positions.convert_date_if_provided(changes["due_date"])

        with self.handle_database_operation("Failed to update card"):
            target_list_id = changes.get("list_id")
            if target_list_id is not None and target_list_id != card.list_id:
                self.authorization.verify_list_ownership(target_list_id, user_id)
                if "position" not in changes:
                    changes["position"] = self._next_position_in(target_list_id)

            scoped = self.db.query(Card).filter(Card.id == card_id)
            affected = scoped.update(changes) if changes else scoped.count()
            if affected == 0:
                raise NotFoundError(f"Card with ID {card_id} not found")
            self.db.commit()

        return self.find_one(card_id, user_id)

    def remove(self, card_id, user_id) -> Dict[str, str]:
        self.authorization.verify_card_ownership(card_id, user_id)

        with self.handle_database_operation("Failed to remove card"):
            affected = self.db.query(Card).filter(Card.id == card_id).delete()
            if affected == 0:
                raise NotFoundError(f"Card with ID {card_id} not found")
            self.db.commit()

        logger.info("Removed card %s", card_id)
        return {"message": "Card removed successfully"}

    def move_card(self, card_id, new_list_id, user_id, new_position: Optional[int] = None) -> Card:
        self.authorization.verify_card_ownership(card_id, user_id)
        self.authorization.verify_list_ownership(new_list_id, user_id)

        with self.handle_database_operation("Failed to move card"):
            position = new_position
            if position is None:
                position = self._next_position_in(new_list_id)

            affected = self.db.query(Card).filter(Card.id == card_id).update(
                {"list_id": new_list_id, "position": position}
            )
            if affected == 0:
                raise NotFoundError(f"Card with ID {card_id} not found")
            self.db.commit()

        logger.info("Moved card %s to list %s at position %d", card_id, new_list_id, position)
        return self.find_one(card_id, user_id)

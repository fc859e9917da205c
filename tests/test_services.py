import uuid
from datetime import datetime

import pytest

from app.core.exceptions import (
    AccessDeniedError,
    ConflictError,
    InvalidDateError,
    NotFoundError,
    OperationFailedError,
)
from app.models import Board, BoardList, Card
from app.schemas.board import BoardCreate, BoardUpdate
from app.schemas.board_list import ListCreate
from app.schemas.card import CardCreate, CardUpdate
from app.services.authorization import AuthorizationService
from app.services.base import BaseService
from app.services.board_service import BoardService
from app.services.card_service import CardService
from app.services.list_service import ListService
from app.services.position import PositionService


@pytest.fixture
def chain(db, owner):
    """A board -> list -> card chain owned by ``owner``."""
    board = Board(name="Board", user_id=owner.id)
    db.add(board)
    db.flush()
    board_list = BoardList(name="List", position=1, board_id=board.id)
    db.add(board_list)
    db.flush()
    card = Card(title="Card", position=1, list_id=board_list.id)
    db.add(card)
    db.commit()
    return board, board_list, card


class TestPositionService:
    def test_first_sibling_gets_one(self, db, chain):
        board, _, _ = chain
        assert PositionService(db).get_next_position(Card, list_id=uuid.uuid4()) == 1

    def test_next_is_one_past_highest(self, db, chain):
        board, board_list, _ = chain
        db.add(BoardList(name="Far", position=9, board_id=board.id))
        db.commit()

        assert PositionService(db).get_next_position(BoardList, board_id=board.id) == 10
        assert PositionService(db).get_next_position(Card, list_id=board_list.id) == 2

    def test_lock_parent_is_harmless_on_sqlite(self, db, chain):
        board, _, _ = chain
        positions = PositionService(db)
        positions.lock_parent(Board, board.id)
        assert positions.get_next_position(BoardList, board_id=board.id) == 2

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2024-12-31T23:59:59.000Z", datetime(2024, 12, 31, 23, 59, 59)),
            ("2024-12-31T23:59:59.1Z", datetime(2024, 12, 31, 23, 59, 59, 100000)),
            ("2024-12-31T23:59:59+02:00", datetime(2024, 12, 31, 21, 59, 59)),
            ("2024-12-31", datetime(2024, 12, 31)),
            (datetime(2020, 1, 1, 8, 30), datetime(2020, 1, 1, 8, 30)),
        ],
    )
    def test_convert_date(self, value, expected):
        assert PositionService.convert_date_if_provided(value) == expected

    def test_convert_absent_date(self):
        assert PositionService.convert_date_if_provided(None) is None

    def test_convert_bad_date(self):
        with pytest.raises(InvalidDateError):
            PositionService.convert_date_if_provided("31/12/2024")


class TestAuthorizationService:
    def test_board_owner_passes(self, db, owner, chain):
        board, _, _ = chain
        assert AuthorizationService(db).verify_board_ownership(board.id, owner.id).id == board.id

    def test_board_stranger_and_missing_are_denied(self, db, stranger, owner, chain):
        board, _, _ = chain
        authorization = AuthorizationService(db)
        with pytest.raises(AccessDeniedError):
            authorization.verify_board_ownership(board.id, stranger.id)
        with pytest.raises(AccessDeniedError):
            authorization.verify_board_ownership(uuid.uuid4(), owner.id)

    def test_list_checks(self, db, owner, stranger, chain):
        _, board_list, _ = chain
        authorization = AuthorizationService(db)

        assert authorization.verify_list_ownership(board_list.id, owner.id).id == board_list.id
        with pytest.raises(AccessDeniedError):
            authorization.verify_list_ownership(board_list.id, stranger.id)
        with pytest.raises(NotFoundError):
            authorization.verify_list_ownership(uuid.uuid4(), owner.id)

    def test_card_check_returns_card_with_chain_loaded(self, db, owner, stranger, chain):
        board, _, card = chain
        authorization = AuthorizationService(db)

        found = authorization.verify_card_ownership(card.id, owner.id)
        assert found.id == card.id
        assert found.list.board.id == board.id

        with pytest.raises(AccessDeniedError):
            authorization.verify_card_ownership(card.id, stranger.id)
        with pytest.raises(NotFoundError):
            authorization.verify_card_ownership(uuid.uuid4(), owner.id)


class TestHandleDatabaseOperation:
    def test_domain_errors_pass_through(self, db):
        service = BaseService(db)
        with pytest.raises(NotFoundError):
            with service.handle_database_operation("Failed"):
                raise NotFoundError("gone")

    def test_other_errors_are_wrapped_with_context(self, db):
        service = BaseService(db)
        with pytest.raises(OperationFailedError) as excinfo:
            with service.handle_database_operation("Failed to frobnicate"):
                raise RuntimeError("disk on fire")
        assert excinfo.value.message == "Failed to frobnicate: disk on fire"

    def test_integrity_errors_become_conflicts(self, db, chain):
        board, _, _ = chain
        service = BaseService(db)
        with pytest.raises(ConflictError):
            with service.handle_database_operation("Failed to create list"):
                db.add(BoardList(name="Clash", position=1, board_id=board.id))
                db.commit()

        # the session is usable again after the rollback
        assert db.query(BoardList).count() == 1

    def test_missing_parent_row_is_not_found(self, db, owner):
        class AllowAll(AuthorizationService):
            def verify_board_ownership(self, board_id, user_id):
                return None

        service = ListService(db, authorization=AllowAll(db))
        with pytest.raises(NotFoundError) as excinfo:
            service.create(uuid.uuid4(), ListCreate(name="Orphan"), owner.id)
        assert excinfo.value.message == "Failed to create list: the parent record no longer exists"
        assert db.query(BoardList).count() == 0


class TestBoardService:
    def test_scoped_lookups(self, db, owner, stranger):
        service = BoardService(db)
        board = service.create(owner.id, BoardCreate(name="Mine"))

        assert service.find_one(board.id, owner.id).name == "Mine"
        with pytest.raises(NotFoundError):
            service.find_one(board.id, stranger.id)
        with pytest.raises(NotFoundError):
            service.update(board.id, BoardUpdate(name="Theirs"), stranger.id)
        assert service.remove(board.id, stranger.id) == {"message": "Board not found or access denied"}
        assert service.find_belongs_to_user(stranger.id) == []

    def test_explicit_null_name_is_ignored(self, db, owner):
        service = BoardService(db)
        board = service.create(owner.id, BoardCreate(name="Keep"))

        updated = service.update(board.id, BoardUpdate(name=None, description="added"), owner.id)
        assert updated.name == "Keep"
        assert updated.description == "added"


class TestListAndCardServices:
    def test_list_create_on_foreign_board_is_denied(self, db, stranger, chain):
        board, _, _ = chain
        with pytest.raises(AccessDeniedError):
            ListService(db).create(board.id, ListCreate(name="Sneaky"), stranger.id)

    def test_card_positions_and_move(self, db, owner, chain):
        board, board_list, card = chain
        cards = CardService(db)
        other = ListService(db).create(board.id, ListCreate(name="Other"), owner.id)

        created = cards.create(board_list.id, CardCreate(title="Second"), owner.id)
        assert created.position == 2

        moved = cards.move_card(card.id, other.id, owner.id)
        assert (moved.list_id, moved.position) == (other.id, 1)

        again = cards.move_card(created.id, other.id, owner.id)
        assert again.position == 2

    def test_move_checks_destination_owner(self, db, owner, stranger, chain):
        _, _, card = chain
        foreign_board = BoardService(db).create(stranger.id, BoardCreate(name="Foreign"))
        foreign_list = ListService(db).create(foreign_board.id, ListCreate(name="Inbox"), stranger.id)

        with pytest.raises(AccessDeniedError):
            CardService(db).move_card(card.id, foreign_list.id, owner.id)

    def test_card_update_with_bad_date_leaves_card_alone(self, db, owner, chain):
        _, _, card = chain
        with pytest.raises(InvalidDateError):
            CardService(db).update(card.id, CardUpdate(title="New", due_date="soon"), owner.id)
        assert CardService(db).find_one(card.id, owner.id).title == "Card"

"""Sibling ordering and date coercion helpers."""
from datetime import datetime, timezone
from typing import Optional, Union

from sqlalchemy.orm import Session

from app.core.exceptions import InvalidDateError


class PositionService:
    def __init__(self, db: Session):
        self.db = db

    def lock_parent(self, model, parent_id) -> None:
        """Take a row lock on the parent before computing a child position.

        Concurrent creates under the same board or list then queue behind each
        other until the inserting transaction commits. SQLite has no
        ``FOR UPDATE``; its single writer gives the same ordering.
        """
        self.db.query(model.id).filter(model.id == parent_id).with_for_update().first()

    def get_next_position(self, model, **siblings) -> int:
        """Return one past the highest ``position`` among matching rows, or 1."""
        last = self.db.query(model.position).filter_by(**siblings).order_by(
            model.position.desc()
        ).first()
        return last.position + 1 if last else 1

    @staticmethod
    def convert_date_if_provided(value: Optional[Union[str, datetime]]) -> Optional[datetime]:
        """Parse an ISO-8601 date or datetime into a naive UTC ``datetime``."""
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            parsed = value
        else:
            text = value.strip()
            if text.endswith(("Z", "z")):
                text = text[:-1] + "+00:00"
            try:
                parsed = datetime.fromisoformat(text)
            except ValueError:
                raise InvalidDateError(f"Invalid date: {value!r}")
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        return parsed

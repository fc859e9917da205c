"""Shared plumbing for the CRUD services."""
import logging
from contextlib import contextmanager
from typing import Iterable, Iterator

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, DomainError, NotFoundError, OperationFailedError

logger = logging.getLogger(__name__)

FOREIGN_KEY_VIOLATION = "23503"


def is_foreign_key_violation(error: IntegrityError) -> bool:
    """True when the driver reports a missing referenced row (SQLSTATE 23503)."""
    orig = error.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code is not None:
        return code == FOREIGN_KEY_VIOLATION
    return "foreign key constraint" in str(orig).lower()


class BaseService:
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def handle_database_operation(self, error_message: str) -> Iterator[None]:
        """Run a unit of persistence work with uniform failure handling.

        Domain errors propagate unchanged, unique-constraint violations become
        ``ConflictError``, a vanished parent row becomes ``NotFoundError`` and
        anything else is wrapped in
        ``OperationFailedError`` carrying ``error_message`` and the cause.
        The session is rolled back in every failure case.
        """
        try:
            yield
        except DomainError:
            self.db.rollback()
            raise
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("%s: integrity error: %s", error_message, e.orig)
            if is_foreign_key_violation(e):
                raise NotFoundError(f"{error_message}: the parent record no longer exists") from e
            raise ConflictError(f"{error_message}: a record with the same unique values already exists") from e
        except Exception as e:
            self.db.rollback()
            logger.exception(error_message)
            raise OperationFailedError(f"{error_message}: {e}") from e

    @staticmethod
    def patch_values(data: BaseModel, required: Iterable[str] = ()) -> dict:
        """Fields the client actually sent, minus nulls for NOT NULL columns."""
        required = set(required)
        return {
            key: value
            for key, value in data.model_dump(exclude_unset=True).items()
            if value is not None or key not in required
        }

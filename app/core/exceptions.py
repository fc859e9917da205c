"""Domain exceptions raised by the service layer.

Routes never translate these by hand; ``register_exception_handlers`` maps each
one to its HTTP status once, at application start.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class DomainError(Exception):
    """Base class for failures the service layer knows how to describe."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    """The referenced entity does not exist (for this caller)."""

    status_code = status.HTTP_404_NOT_FOUND


class AccessDeniedError(DomainError):
    """The entity exists but the caller is not its owner."""

    status_code = status.HTTP_403_FORBIDDEN


class ConflictError(DomainError):
    """A uniqueness rule was violated."""

    status_code = status.HTTP_409_CONFLICT


class InvalidDateError(DomainError):
    status_code = status.HTTP_400_BAD_REQUEST


class OperationFailedError(DomainError):
    """Any other persistence failure, wrapped with context."""


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # the rejected values may include passwords; report locations and reasons only
    errors = [{k: v for k, v in error.items() if k != "input"} for error in exc.errors()]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(errors)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

"""Exception handlers mapping domain errors to JSON ``{success, message}`` responses.

    InvalidInputError, request validation  → 400
    EntityNotFoundError                    → 404
    DuplicateEntityError                   → 200 (informational, nothing changed)
    CorruptCollectionError, PersistenceError → 500
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.exceptions import (
    CorruptCollectionError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidInputError,
    PersistenceError,
)

logger = logging.getLogger(__name__)


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first = errors[0]
    # loc is e.g. ("body", "studentId") or ("query", "domain")
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    if not field:
        return f"Invalid request body: {first.get('msg', 'invalid')}"
    return f"Invalid value for '{field}': {first.get('msg', 'invalid')}"


def register_exception_handlers(app: FastAPI) -> None:
    """Register the domain exception handlers on a FastAPI application."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report missing or malformed body fields as 400 rather than 422."""
        return _failure(status.HTTP_400_BAD_REQUEST, _describe_validation_error(exc))

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
        return _failure(status.HTTP_400_BAD_REQUEST, exc.message)

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
        return _failure(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(DuplicateEntityError)
    async def duplicate_handler(request: Request, exc: DuplicateEntityError) -> JSONResponse:
        return _failure(status.HTTP_200_OK, str(exc))

    @app.exception_handler(CorruptCollectionError)
    async def corrupt_collection_handler(
        request: Request, exc: CorruptCollectionError
    ) -> JSONResponse:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    @app.exception_handler(PersistenceError)
    async def persistence_handler(request: Request, exc: PersistenceError) -> JSONResponse:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

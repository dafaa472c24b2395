"""Mapping of service and request errors onto the error envelope."""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio_backend.services.errors import (
    DuplicateNameError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from portfolio_backend.services.skill_populator import PopulateError
from portfolio_backend.utils.responses import error_response

logger = logging.getLogger(__name__)


def _format_request_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return error_response("Invalid skill data", str(exc), 400)


async def handle_duplicate_name(request: Request, exc: DuplicateNameError) -> JSONResponse:
    return error_response("Duplicate skill name", str(exc), 400)


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response("Skill not found", str(exc), 404)


async def handle_persistence_error(request: Request, exc: PersistenceError) -> JSONResponse:
    logger.error("Database failure on %s %s: %s", request.method, request.url.path, exc)
    return error_response("Database operation failed", str(exc), 500)


async def handle_populate_error(request: Request, exc: PopulateError) -> JSONResponse:
    logger.error("Skills population failed: %s", exc)
    return error_response("Failed to populate skills", str(exc), 500)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response("Invalid request", _format_request_errors(exc), 400)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    try:
        phrase = HTTPStatus(exc.status_code).phrase
    except ValueError:
        phrase = "Request failed"
    return error_response(phrase, str(exc.detail), exc.status_code)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response("Internal server error", str(exc), 500)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every error-to-envelope handler to the application."""
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(DuplicateNameError, handle_duplicate_name)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(PersistenceError, handle_persistence_error)
    app.add_exception_handler(PopulateError, handle_populate_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)

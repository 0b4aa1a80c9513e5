"""Exception handlers translating error kinds into HTTP responses.

Each error kind has exactly one response shape:

    ValidationError         -> 400 {"error": "Validation failed", "details": [...]}
    RequestValidationError  -> same as ValidationError
    NotFoundError           -> 404 {"error": message}
    DomainError             -> 400 {"error": message}
    anything else           -> 500 {"error": "Internal server error"}

Usage:
    app = FastAPI()
    register_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pettrack.domain.errors import DomainError, NotFoundError, ValidationError
from pettrack.models import pet, weight

logger = logging.getLogger(__name__)

_FIELD_MESSAGES: dict[str, dict[str, str]] = {**pet.ERROR_MESSAGES, **weight.ERROR_MESSAGES}


def describe_request_errors(exc: RequestValidationError) -> list[str]:
    """Turn pydantic errors into client messages, one per violated rule, in order."""
    messages: list[str] = []
    for error in exc.errors():
        loc = error.get("loc", ())
        field = str(loc[-1]) if loc else ""
        message = _FIELD_MESSAGES.get(field, {}).get(error.get("type", ""), error.get("msg", ""))
        if message not in messages:
            messages.append(message)
    return messages


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info("Validation failed on %s %s: %s", request.method, request.url.path, exc.messages)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Validation failed", "details": exc.messages},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report FastAPI's body/path validation failures in the ValidationError shape."""
    return await validation_error_handler(request, ValidationError(describe_request_errors(exc)))


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info("%s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": exc.message})


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the full traceback, return a generic body."""
    logger.exception("Unexpected error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register one handler per error kind plus a catch-all."""
    app.add_exception_handler(ValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(NotFoundError, not_found_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)

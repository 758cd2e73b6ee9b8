"""Exception handlers for the API."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .core.errors import (
    FinanceError,
    InvalidDateRangeError,
    NotFoundError,
    OverlapError,
    ReferenceInactiveError,
)

logger = logging.getLogger(__name__)


class FinanceAPIError(Exception):
    """Base exception for errors raised by the HTTP layer itself."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class AuthenticationError(FinanceAPIError):
    """Authentication failed."""

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, status_code=401)


class ConflictError(FinanceAPIError):
    """Resource clashes with an existing one (duplicate email, category name)."""

    def __init__(self, message: str):
        super().__init__(message, status_code=409)


# Domain errors carry no transport details; this table decides them
DOMAIN_STATUS_CODES: dict[type[FinanceError], int] = {
    NotFoundError: 404,
    ReferenceInactiveError: 404,
    InvalidDateRangeError: 400,
    OverlapError: 409,
}


def status_code_for(exc: FinanceError) -> int:
    for error_type, status_code in DOMAIN_STATUS_CODES.items():
        if isinstance(exc, error_type):
            return status_code
    return 400


async def finance_api_error_handler(request: Request, exc: FinanceAPIError) -> JSONResponse:
    """Handle errors raised by routers and auth dependencies."""
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers,
    )


async def domain_error_handler(request: Request, exc: FinanceError) -> JSONResponse:
    """Translate core validation errors into HTTP responses."""
    status_code = status_code_for(exc)
    logger.info(f"{request.method} {request.url.path} rejected ({status_code}): {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(FinanceAPIError, finance_api_error_handler)
    app.add_exception_handler(FinanceError, domain_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

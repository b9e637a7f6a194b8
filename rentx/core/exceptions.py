"""
Error taxonomy for the RentX API and the handlers that render it.

Every error carries the status code it maps to. Responses are plain text,
matching the success responses.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class RentxError(Exception):
    """Base exception for the RentX service."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def prefixed(self, context: str) -> "RentxError":
        """Return a copy of this error with the operation context prepended."""
        return type(self)(f"{context}: {self.message}")


class ClientInputError(RentxError):
    """Malformed or missing request input. Nothing was written."""

    status_code = 400


class CredentialError(RentxError):
    """No user matches the supplied credentials."""

    status_code = 401

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class UserNotFoundError(RentxError):
    """Raised by the store when a user lookup matches no row."""

    status_code = 404


class ConstraintViolationError(RentxError):
    """A write was rejected by a store constraint."""

    status_code = 500


class DuplicateEmailError(ConstraintViolationError):
    """The email is already registered."""


class MissingOwnerError(ConstraintViolationError):
    """The listing references a user that does not exist."""


class ResourceError(RentxError):
    """The store or the filesystem failed underneath an operation."""

    status_code = 500


class StoreError(ResourceError):
    """Any store failure other than a constraint violation."""


class ImageWriteError(ResourceError):
    """The uploaded image could not be written to the content directory."""


async def rentx_exception_handler(request: Request, exc: RentxError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Render framework errors (404, 405) as plain text instead of JSON."""
    headers = getattr(exc, "headers", None)
    detail = str(exc.detail)
    if exc.status_code == 405 and headers and "Allow" in headers:
        detail = f"Only {headers['Allow']} allowed"
    return PlainTextResponse(
        detail,
        status_code=exc.status_code,
        headers=headers,
    )


def add_exception_handlers(app: FastAPI) -> None:
    """Register the plain-text error handlers on the application."""
    app.add_exception_handler(RentxError, rentx_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

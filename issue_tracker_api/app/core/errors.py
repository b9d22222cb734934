"""
Domain errors and their HTTP representation.

Services raise subclasses of ``IssueTrackerError``; the handlers
registered by ``register_exception_handlers`` turn them into plain‑text
responses whose body is the human‑readable reason.  Request bodies
FastAPI cannot decode are reported the same way with status 400.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


class IssueTrackerError(Exception):
    """Base class for errors surfaced verbatim to API clients."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(IssueTrackerError):
    """Malformed or inconsistent input."""


class NotFoundError(IssueTrackerError):
    """The referenced issue does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ImmutableStateError(IssueTrackerError):
    """Attempted change of an issue in a terminal status."""


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(IssueTrackerError)
    async def issue_tracker_error_handler(request: Request, exc: IssueTrackerError):
        logger.warning(
            "%s %s rejected (%s): %s",
            request.method,
            request.url.path,
            exc.status_code,
            exc.message,
        )
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if any(err.get("loc", ())[:1] == ("path",) for err in errors):
            message = "Invalid issue ID"
        else:
            message = "Invalid request body"
        logger.warning("%s %s rejected (400): %s %s", request.method, request.url.path, message, errors)
        return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)

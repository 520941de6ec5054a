"""Centralized API exception definitions and handlers."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from payment_processor.constants import StatusCode

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base domain/application error."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InstructionRuleError(AppError):
    """Raised when a parsed instruction violates a business rule.

    ``code`` is the stable instruction status code (``AM01``, ``AC03`` ...),
    independent of the HTTP status.
    """

    def __init__(self, code: StatusCode, message: str) -> None:
        super().__init__(message=message, status_code=400)
        self.code = code


async def app_error_handler(_request: Request, exc: AppError) -> JSONResponse:
    """Render typed application exceptions as JSON responses."""

    content: dict[str, str] = {"detail": exc.message}
    if isinstance(exc, InstructionRuleError):
        content["status_code"] = exc.code.value
    return JSONResponse(status_code=exc.status_code, content=content)


async def unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Catch-all exception handler for non-domain errors."""

    logger.exception("Unhandled error: %s", exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach API exception handlers once during startup."""

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

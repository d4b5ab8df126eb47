"""Error Handlers: every failure leaves the API as an ExamGuideError envelope.

Invariants:
    - Domain errors are rendered with their own to_response()
    - Pydantic RequestValidationError is converted to InvalidInputError (400) first
    - Any other exception becomes InternalError (500); its detail goes to the log only
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from examguide.core.errors import (
    ExamGuideError, FieldIssue, InternalError, InvalidInputError,
)

logger = logging.getLogger(__name__)


def _render(request: Request, exc: ExamGuideError) -> JSONResponse:
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _issues(exc: RequestValidationError) -> list[FieldIssue]:
    return [
        FieldIssue(
            field=".".join(str(part) for part in e["loc"]),
            message=e["msg"],
            type=e["type"],
        )
        for e in exc.errors()
    ]


async def handle_exam_guide_error(request: Request, exc: ExamGuideError):
    return _render(request, exc)


async def handle_request_validation(request: Request, exc: RequestValidationError):
    return _render(request, InvalidInputError.from_issues(_issues(exc)))


async def handle_unexpected(request: Request, exc: Exception):
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.url.path}",
        exc_info=exc,
        extra={"path": request.url.path},
    )
    return _render(request, InternalError())


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(ExamGuideError, handle_exam_guide_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected)

"""Error Handlers — translate exceptions into the Chat API error envelope.

Invariants:
    - Every error body is {"error": {code, message, category, severity, timestamp, ...}}
    - ChatApiError → its own http_status; 5xx logged at ERROR, 4xx at WARNING
    - RequestValidationError (bad JSON, missing field, bad text) → 400 + per-field details
    - Any other exception → 500 INTERNAL_ERROR, never leaks internal details

Design Decisions:
    - Handlers are plain module functions registered in one table, so tests
      can call them directly (ASGITransport re-raises unhandled exceptions)
    - Routes raise, handlers translate: no status-code mapping inside route bodies
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from chat_api.core.errors import ChatApiError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


async def handle_chat_api_error(request: Request, exc: ChatApiError) -> JSONResponse:
    level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
    logger.log(
        level, f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "chat_id": exc.context.chat_id,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [_field_detail(e) for e in exc.errors()]
    logger.warning(
        f"Rejected {request.method} {request.url.path}: "
        f"{', '.join(d['field'] for d in details)}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    body = _envelope(
        "VALIDATION_ERROR", "Invalid request data",
        ErrorCategory.VALIDATION, ErrorSeverity.WARNING,
    )
    body["error"]["details"] = details
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


_HANDLERS = (
    (ChatApiError, handle_chat_api_error),
    (RequestValidationError, handle_request_validation_error),
    (Exception, handle_unexpected_error),
)


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain, validation and catch-all handlers on the app."""
    for exc_class, handler in _HANDLERS:
        app.add_exception_handler(exc_class, handler)


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
) -> dict:
    """Same shape as ChatApiError.to_response() for errors raised outside the domain."""
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    }


def _field_detail(error: dict) -> dict:
    # loc is ("body", "text") / ("path", "chat_id"); the source prefix is kept
    return {
        "field": ".".join(str(part) for part in error["loc"]),
        "message": error["msg"],
        "type": error["type"],
    }

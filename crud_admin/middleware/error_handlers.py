"""Exception handlers turning admin errors into JSON responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from crud_admin.exceptions import (
    AdminException,
    PropertyTypeException,
    ResourceNotFoundException,
    TemplateRenderException,
)
from crud_admin.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

EVENT_TYPES: tuple[tuple[type[AdminException], str], ...] = (
    (TemplateRenderException, "template_render_error"),
    (PropertyTypeException, "property_type_error"),
    (ResourceNotFoundException, "resource_not_found"),
)

# Keys that cannot be passed as extra fields to a LogRecord
RESERVED_LOG_KEYS = frozenset(vars(logging.makeLogRecord({}))) | {
    "message",
    "asctime",
    "event_type",
    "error_code",
    "status_code",
    "path",
}


def log_context(exc: AdminException) -> dict:
    return {key: value for key, value in exc.details.items() if key not in RESERVED_LOG_KEYS}


def event_type_for(exc: AdminException) -> str:
    return next((event for cls, event in EVENT_TYPES if isinstance(exc, cls)), "admin_error")


def error_body(code: str, message: str, details: dict | None = None) -> dict:
    error: dict = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {"error": error}


async def admin_exception_handler(request: Request, exc: AdminException) -> JSONResponse:
    """Log an admin error with its template/type/resource context and return it as JSON.

    Server-side failures (5xx) are logged as errors, client mistakes such as
    an unknown resource id as warnings.
    """
    log_with_context(
        logger,
        "error" if exc.status_code >= 500 else "warning",
        exc.message,
        event_type=event_type_for(exc),
        error_code=exc.code.value,
        status_code=exc.status_code,
        path=request.url.path,
        **log_context(exc),
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.code.value, exc.message, exc.details),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log_with_context(
        logger,
        "error",
        "Unhandled exception while serving admin page",
        event_type="unhandled_error",
        error_type=type(exc).__name__,
        path=request.url.path,
    )
    logger.error("Exception traceback:", exc_info=exc)

    # internals stay in the log
    return JSONResponse(status_code=500, content=error_body("INTERNAL_ERROR", "Internal server error"))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AdminException, admin_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

"""Error Handlers — global exception handlers for the Ward Site API.

Invariants:
    - WardSiteError → its http_status with the to_response() envelope
    - An inverted event date range is always INVALID_DATE_RANGE, whether the
      schema validator or EventStore.update caught it
    - Any other RequestValidationError → 400 VALIDATION_ERROR with field details
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - 4xx domain errors log at WARNING, 5xx at ERROR with the auxiliary and
      resource from the error context attached
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from wardsite.core.errors import (
    ErrorCategory, ErrorContext, ErrorSeverity, InvalidDateRangeError, WardSiteError,
)
from wardsite.schemas.event import DATE_RANGE_ERROR_TYPE

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(WardSiteError, ward_site_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)


async def ward_site_error_handler(request: Request, exc: WardSiteError):
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        f"{exc.code}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "auxiliary": exc.context.auxiliary,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors and all(e["type"] == DATE_RANGE_ERROR_TYPE for e in errors):
        return await ward_site_error_handler(request, _date_range_error(request, exc))

    logger.warning(
        f"Validation error on {request.url.path}: {errors}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request data",
                "category": ErrorCategory.VALIDATION.value,
                "severity": ErrorSeverity.ERROR.value,
                "details": [
                    {
                        "field": ".".join(str(loc) for loc in e["loc"]),
                        "message": e["msg"],
                        "type": e["type"],
                    }
                    for e in errors
                ],
            },
        },
    )


async def generic_error_handler(request: Request, exc: Exception):
    """Catch-all — never leaks internal details."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "category": ErrorCategory.INTERNAL.value,
                "severity": ErrorSeverity.CRITICAL.value,
            },
        },
    )


def _date_range_error(
    request: Request, exc: RequestValidationError,
) -> InvalidDateRangeError:
    """Rebuild the schema-level range failure as the domain error."""
    body = exc.body if isinstance(exc.body, dict) else {}
    title = body.get("title")
    if isinstance(title, str):
        title = title.strip()
    event_id = request.path_params.get("event_id")
    return InvalidDateRangeError(
        title if isinstance(title, str) else None,
        ErrorContext(resource_id=event_id),
    )

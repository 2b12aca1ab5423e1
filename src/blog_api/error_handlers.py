"""Global exception handlers — every error reaches the client as JSON.

Request validation failures become 400s with a message naming the cause;
anything unhandled becomes a 500 that never leaks internal details.
"""

from collections.abc import Sequence
from typing import Any

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

log = structlog.get_logger()

INVALID_POST_ID = "Invalid post ID"
INVALID_JSON = "Invalid JSON"
FIELDS_REQUIRED = "Title, content, and author are required"
INTERNAL_ERROR = "Internal Server Error"

# Error types meaning a field was absent or blank rather than malformed.
_FIELD_ERROR_TYPES = frozenset({"missing", "string_too_short"})


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(
        RequestValidationError,
        _validation_error_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(Exception, _unhandled_error_handler)


def validation_error_detail(errors: Sequence[Any]) -> str:
    """Pick the client-facing message for a list of request validation errors."""
    locs = [tuple(e.get("loc", ())) for e in errors]
    if any(loc[:1] == ("path",) for loc in locs):
        return INVALID_POST_ID
    for err, loc in zip(errors, locs, strict=True):
        # A field-level error sits below the body itself: ("body", "title").
        if len(loc) < 2 or err.get("type") not in _FIELD_ERROR_TYPES:
            return INVALID_JSON
    return FIELDS_REQUIRED


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    detail = validation_error_detail(exc.errors())
    await log.awarning(
        "request_rejected",
        path=request.url.path,
        detail=detail,
        errors=[e.get("type") for e in exc.errors()],
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    await log.aexception(
        "unhandled_exception", method=request.method, path=request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": INTERNAL_ERROR}
    )

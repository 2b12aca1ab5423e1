"""Request logging and heartbeat middleware."""

import time
import uuid
from collections.abc import Awaitable, Callable

import structlog
from fastapi import Request, Response
from fastapi.responses import JSONResponse

log = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"
DEFAULT_HEARTBEAT_PATH = "/up"

CallNext = Callable[[Request], Awaitable[Response]]


async def heartbeat(request: Request, call_next: CallNext) -> Response:
    """Answer liveness probes before routing."""
    settings = getattr(request.app.state, "settings", None)
    path = settings.heartbeat_path if settings is not None else DEFAULT_HEARTBEAT_PATH
    if request.method in ("GET", "HEAD") and request.url.path == path:
        return JSONResponse({"status": "ok"})
    return await call_next(request)


async def request_logging(request: Request, call_next: CallNext) -> Response:
    """Bind a request id to the log context and log each request with its timing."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        await log.aerror(
            "request_failed",
            method=request.method,
            path=request.url.path,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        raise
    response.headers[REQUEST_ID_HEADER] = request_id
    await log.ainfo(
        "request_completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - start) * 1000, 2),
    )
    return response

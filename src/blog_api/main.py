"""FastAPI application entrypoint."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from blog_api import __version__
from blog_api.config import Settings
from blog_api.error_handlers import register_error_handlers
from blog_api.middleware import heartbeat, request_logging
from blog_api.posts import router as posts_router
from blog_api.store import create_post_store
from blog_api.telemetry import add_trace_context, init_telemetry, shutdown_telemetry


def configure_logging(log_level: str = "info") -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            add_trace_context,  # type: ignore[list-item]
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper())
        ),
    )


configure_logging()

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = Settings()
    configure_logging(settings.log_level)
    init_telemetry(settings.otel_exporter_otlp_endpoint)
    app.state.settings = settings
    store = create_post_store(settings)
    app.state.store = store

    await log.ainfo("service started", post_count=len(store.list()), port=settings.port)
    yield

    await log.ainfo("service stopped", post_count=len(store.list()))
    shutdown_telemetry()


app = FastAPI(title="Blog Post API", version=__version__, lifespan=lifespan)
app.include_router(posts_router)
register_error_handlers(app)
# Starlette runs the last-added middleware first: logging wraps the heartbeat.
app.middleware("http")(heartbeat)
app.middleware("http")(request_logging)
FastAPIInstrumentor.instrument_app(app)


def run() -> None:
    """Console entrypoint: serve the app with uvicorn."""
    settings = Settings()
    uvicorn.run(
        "blog_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )

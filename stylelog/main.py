"""
stylelog demo host

FastAPI application factory.
Mounts the health router and configures logging, exception handlers and the
console request logger.
"""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from stylelog.api import health
from stylelog.config import Settings, get_settings
from stylelog.console import Console
from stylelog.middleware import RequestLoggingMiddleware
from stylelog.styles import effective_style

logger = logging.getLogger("stylelog")


def _configure_logging(settings: Settings) -> None:
    """Set up application logging."""
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    fmt = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers.clear()
    root.addHandler(handler)

    # The request logger replaces uvicorn's access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup logic runs before ``yield``, shutdown logic runs after."""
    settings: Settings = app.state.settings
    logger.info(
        "%s v%s starting up [%s] (log style: %s)",
        settings.app_name,
        settings.app_version,
        settings.environment,
        app.state.log_style,
    )
    yield
    logger.info("%s shutting down", settings.app_name)


def _internal_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled exception and return a clean 500 response."""
    logger.exception(
        "Unhandled error | %s %s | %s",
        request.method,
        request.url.path,
        str(exc),
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "detail": "An unexpected error occurred. Please try again later.",
        },
    )


def create_app(settings: Settings | None = None, console: Console | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""
    settings = settings or get_settings()
    _configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Console request logging with selectable output styles.",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.log_style = effective_style(settings.log_style).value

    # --- Middleware (order matters: last added = first executed) ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Unhandled errors become a JSON 500 here, inside the request logger,
    # so the failed request is still logged.
    @app.middleware("http")
    async def unhandled_error_middleware(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return _internal_error_response(request, exc)

    app.add_middleware(RequestLoggingMiddleware, style=settings.log_style, console=console)

    # --- Routers ---
    app.include_router(health.router)

    return app


# Module-level app instance for uvicorn
app = create_app()

"""
Middleware components and the lifespan handler.

Security headers, request logging with a per-request id, and CORS are
installed here; the lifespan hook configures logging and owns the database
engine's lifetime.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.routing import Match

from bloglist.configs import settings
from bloglist.db import close_db, init_db
from bloglist.monitoring import (
    bind_request_id,
    clear_context,
    configure_logging,
    get_logger,
)

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def _route_label(request: Request) -> str:
    """The matched endpoint's summary, falling back to method and path."""
    fallback = f"{request.method} {request.url.path}"
    for route in request.app.routes:
        match, _ = route.matches(request.scope)
        if match is not Match.FULL:
            continue
        if isinstance(route, APIRoute) and route.summary:
            return route.summary
        return getattr(route, "name", None) or fallback
    return fallback


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Manage application startup and shutdown."""
    configure_logging()
    logger.info(f"Starting {app.title}...", environment=settings.ENVIRONMENT)

    try:
        await init_db()
    except Exception:
        logger.exception("Failed to initialize services")
        raise

    logger.info("Services initialized successfully")

    yield

    logger.info(f"Shutting down {app.title}...")
    await close_db()


def configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    allowed_origins: list[str] = [
        "http://localhost:5173",  # Vite development
        "http://127.0.0.1:5173",
    ]

    if frontend_url := settings.PRODUCTION_FRONTEND_URL:
        allowed_origins.append(frontend_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Bind a request id, then log the request summary and timing."""

        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        clear_context()
        bind_request_id(request_id)

        start_time = perf_counter()
        logger.info(f"Request: {_route_label(request)}, from ip: {get_remote_address(request)}")
        logger.debug("Request headers", headers=dict(request.headers))

        try:
            response = await call_next(request)
        finally:
            duration = perf_counter() - start_time

        logger.info(
            f"Response: {response.status_code} for {request.method} {request.url.path}",
            duration=f"{duration:.3f}s",
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        clear_context()
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Add security headers to all responses."""

        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response

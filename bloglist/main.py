"""Bloglist Backend - blog and user REST API with token authentication."""

from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from slowapi.errors import RateLimitExceeded

from bloglist.configs import settings
from bloglist.errors import (
    BaseAppError,
    BlogAccessError,
    DatabaseError,
    PasswordHashingError,
    UserAuthenticationError,
    auth_exception_handler,
    blog_access_exception_handler,
    create_exception_handler,
    database_exception_handler,
    password_hashing_exception_handler,
    validation_exception_handler,
)
from bloglist.managers import limiter, rate_limit_exceeded_handler
from bloglist.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from bloglist.monitoring import get_logger
from bloglist.routes import auth_router, blog_router, user_router

app = FastAPI(
    title=settings.APP_NAME,
    description="Blog list API: blogs, users and token login",
    version="1.0.0",
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)

routes = [
    auth_router,
    user_router,
    blog_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (RateLimitExceeded, rate_limit_exceeded_handler),
    (BlogAccessError, blog_access_exception_handler),
    (UserAuthenticationError, auth_exception_handler),
    (PasswordHashingError, password_hashing_exception_handler),
    (DatabaseError, database_exception_handler),
    (BaseAppError, create_exception_handler(get_logger(__name__))),
    (RequestValidationError, validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

app.state.limiter = limiter


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01T12:00:00+00:00",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
@limiter.exempt
async def health_check(request: Request) -> ORJSONResponse:
    """
    Liveness check.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    ORJSONResponse
        Version, status and server time.
    """
    return ORJSONResponse(
        {
            "version": app.version,
            "status": "ok",
            "timestamp": datetime.now(UTC).isoformat(timespec="seconds"),
        },
    )

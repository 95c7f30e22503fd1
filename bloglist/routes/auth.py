"""Login."""

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response

from bloglist.dependencies import AuthServiceDep
from bloglist.managers.rate_limiter import LOGIN_LIMIT, limiter
from bloglist.schemas import LoginRequest, LoginResponse

router = APIRouter(prefix="/api", tags=["🔐 Authentication"])


@router.post(
    "/login",
    response_class=ORJSONResponse,
    response_model=LoginResponse,
    summary="Login for access token",
    description="Authenticate with username and password to obtain a bearer token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                    },
                },
            },
        },
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {"example": {"detail": "Invalid username or password"}},
            },
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="auth_login",
)
@limiter.limit(LOGIN_LIMIT)
async def login(
    request: Request,
    response: Response,
    credentials: LoginRequest,
    auth_service: AuthServiceDep,
) -> LoginResponse:
    """
    Login with username and password.

    Raises
    ------
    InvalidCredentialsError
        If the username is unknown or the password is wrong.
    """
    return await auth_service.login(credentials.username, credentials.password.get_secret_value())

"""User listing and registration."""

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED

from bloglist.dependencies import AuthServiceDep, UserServiceDep
from bloglist.managers.rate_limiter import REGISTER_LIMIT, limiter
from bloglist.schemas import UserCreate, UserResponse

router = APIRouter(prefix="/api/users", tags=["👤 Users"])


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserResponse],
    summary="List users",
    description="Return every user with the url, title, author and id of each of their blogs.",
    operation_id="users_list",
)
async def list_users(service: UserServiceDep) -> list[UserResponse]:
    return await service.list_users()


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    status_code=HTTP_201_CREATED,
    summary="Register a new user",
    description="Username and password are required and must be at least 3 characters long.",
    responses={
        400: {
            "description": "Bad request",
            "content": {"application/json": {"example": {"detail": "Username must be unique"}}},
        },
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="users_register",
)
@limiter.limit(REGISTER_LIMIT)
async def register_user(
    request: Request,
    response: Response,
    user_create: UserCreate,
    auth_service: AuthServiceDep,
) -> UserResponse:
    """
    Register a user.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Response object for the rate limiter.
    user_create : UserCreate
        Registration payload.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    UserResponse
        The new user, without any password material.

    Raises
    ------
    RegistrationError
        If the username is already taken.
    """
    user = await auth_service.register(user_create)
    return UserResponse.from_db(user)

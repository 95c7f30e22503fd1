"""Request-scoped dependencies: repositories, services and the current user."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.db import get_session
from bloglist.errors import UnauthenticatedError
from bloglist.managers.token_manager import decode_access_token
from bloglist.models import UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.services import AuthService, BlogService, UserService

logger = get_logger(__name__)

# auto_error=False: a missing bearer token resolves to "no user" and the
# ownership guard decides what that means for the route.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login", auto_error=False)


def get_user_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Request-scoped database session.

    Returns
    -------
    UserRepository
        Repository bound to the request's session.
    """
    return UserRepository(session)


def get_blog_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> BlogRepository:
    """Resolve the `BlogRepository` dependency."""
    return BlogRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


async def get_optional_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    user_repo: UserRepoDep,
) -> UserDB | None:
    """
    Resolve the user named by the bearer token, if any.

    Parameters
    ----------
    token : str | None
        Bearer token, None when the header is absent.
    user_repo : UserRepository
        User repository.

    Returns
    -------
    UserDB | None
        The user, or None when the token is absent, invalid, expired, or
        names a user that no longer exists.
    """
    if not token:
        return None

    token_data = decode_access_token(token)
    if not token_data or not token_data.user_id:
        return None

    try:
        user_id = UUID(token_data.user_id)
    except ValueError:
        logger.warning("Token carries a malformed user id")
        return None

    return await user_repo.get_by_id(user_id)


OptionalUserDep = Annotated[UserDB | None, Depends(get_optional_user)]


async def require_user(current_user: OptionalUserDep) -> UserDB:
    """
    Resolve the authenticated caller of a blog mutation.

    FastAPI solves dependencies before it validates path parameters and the
    request body, so declaring this first on a route makes an anonymous
    request fail with 401 even when its body or blog id is also invalid.

    Raises
    ------
    UnauthenticatedError
        If the bearer token is absent or resolves to no user.
    """
    if current_user is None:
        raise UnauthenticatedError
    return current_user


CurrentUserDep = Annotated[UserDB, Depends(require_user)]


def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    return AuthService(user_repo)


def get_blog_service(blog_repo: BlogRepoDep, user_repo: UserRepoDep) -> BlogService:
    return BlogService(blog_repo, user_repo)


def get_user_service(user_repo: UserRepoDep, blog_repo: BlogRepoDep) -> UserService:
    return UserService(user_repo, blog_repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]

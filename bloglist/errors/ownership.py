"""Errors raised when the ownership guard refuses a blog mutation."""

from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN, HTTP_404_NOT_FOUND

from bloglist.auth.ownership import Decision, DenyReason
from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


class BlogAccessError(BaseAppError):
    """Base class for refused blog operations."""

    def __init__(self, detail: str, status_code: int) -> None:
        super().__init__(detail, status_code)


class UnauthenticatedError(BlogAccessError):
    """Raised when no user could be resolved from the bearer token."""

    def __init__(self, detail: str = "User missing or invalid") -> None:
        super().__init__(detail, HTTP_401_UNAUTHORIZED)


class BlogNotFoundError(BlogAccessError):
    """Raised when the target blog does not exist."""

    def __init__(self, detail: str = "Blog not found") -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


class ForbiddenError(BlogAccessError):
    """Raised when the caller does not own the target blog."""

    def __init__(self, detail: str = "Permission denied") -> None:
        super().__init__(detail, HTTP_403_FORBIDDEN)


_ERRORS: dict[DenyReason, type[BlogAccessError]] = {
    DenyReason.UNAUTHENTICATED: UnauthenticatedError,
    DenyReason.NOT_FOUND: BlogNotFoundError,
    DenyReason.FORBIDDEN: ForbiddenError,
}


def error_for_decision(decision: Decision) -> BlogAccessError:
    """
    Build the exception matching a denied decision.

    Args:
        decision: A decision with ``allowed=False``

    Returns:
        BlogAccessError: Exception whose status code matches the deny reason

    Raises:
        ValueError: If the decision allowed the operation
    """
    if decision.allowed or decision.reason is None:
        mssg = "Cannot build an error for an allowed decision"
        raise ValueError(mssg)
    return _ERRORS[decision.reason]()


blog_access_exception_handler = create_exception_handler(logger)

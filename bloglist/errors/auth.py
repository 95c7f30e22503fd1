"""Login and registration failures."""

from starlette.status import HTTP_400_BAD_REQUEST, HTTP_401_UNAUTHORIZED

from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


class UserAuthenticationError(BaseAppError):
    def __init__(self, detail: str, status_code: int = HTTP_401_UNAUTHORIZED) -> None:
        super().__init__(detail, status_code)


class InvalidCredentialsError(UserAuthenticationError):
    """Unknown username or wrong password; the two are not told apart."""

    def __init__(self) -> None:
        super().__init__("Invalid username or password")


class RegistrationError(UserAuthenticationError):
    """A new account was refused, e.g. because the username is taken."""

    def __init__(self, detail: str = "Registration failed") -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)


auth_exception_handler = create_exception_handler(logger)

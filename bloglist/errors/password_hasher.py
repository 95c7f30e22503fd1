"""Failures of the Argon2 password hasher."""

from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


class PasswordHashingError(BaseAppError):
    """The hashing backend could not hash a registration password."""

    def __init__(self, detail: str = "Password hashing failed") -> None:
        super().__init__(detail)


class PasswordRehashError(PasswordHashingError):
    """A correct login password could not be moved to a current hash."""

    def __init__(self, detail: str = "Password rehashing failed") -> None:
        super().__init__(detail)


password_hashing_exception_handler = create_exception_handler(logger)

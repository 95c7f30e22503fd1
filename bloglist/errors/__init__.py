from bloglist.errors.auth import (
    InvalidCredentialsError,
    RegistrationError,
    UserAuthenticationError,
    auth_exception_handler,
)
from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    database_exception_handler,
)
from bloglist.errors.ownership import (
    BlogAccessError,
    BlogNotFoundError,
    ForbiddenError,
    UnauthenticatedError,
    blog_access_exception_handler,
    error_for_decision,
)
from bloglist.errors.password_hasher import (
    PasswordHashingError,
    PasswordRehashError,
    password_hashing_exception_handler,
)
from bloglist.errors.validation import validation_exception_handler

__all__ = [
    "BaseAppError",
    "create_exception_handler",
    "BlogAccessError",
    "BlogNotFoundError",
    "ForbiddenError",
    "UnauthenticatedError",
    "blog_access_exception_handler",
    "error_for_decision",
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "database_exception_handler",
    "InvalidCredentialsError",
    "RegistrationError",
    "UserAuthenticationError",
    "auth_exception_handler",
    "PasswordHashingError",
    "PasswordRehashError",
    "password_hashing_exception_handler",
    "validation_exception_handler",
]

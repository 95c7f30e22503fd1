"""Registration and login."""

from datetime import timedelta

from bloglist.configs import settings
from bloglist.errors.auth import InvalidCredentialsError, RegistrationError
from bloglist.errors.database import DuplicateEntryError
from bloglist.managers.password_manager import hash_password, verify_and_update_password
from bloglist.managers.token_manager import create_access_token
from bloglist.models import UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories.protocols import UserStore
from bloglist.schemas.auth import LoginResponse
from bloglist.schemas.user import UserCreate

logger = get_logger(__name__)

DUPLICATE_USERNAME = "Username must be unique"


class AuthService:
    """Service for registering and authenticating users."""

    def __init__(self, user_repo: UserStore) -> None:
        self.user_repo = user_repo

    async def register(self, user_create: UserCreate) -> UserDB:
        """
        Create a user with a hashed password.

        Args:
            user_create: Validated registration data

        Returns:
            UserDB: The new user, with no blogs

        Raises:
            RegistrationError: If the username is taken
        """
        password_hash = await hash_password(user_create.password.get_secret_value())
        try:
            user = await self.user_repo.create_user(
                username=user_create.username,
                name=user_create.name,
                password_hash=password_hash,
            )
        except DuplicateEntryError as e:
            raise RegistrationError(DUPLICATE_USERNAME) from e

        logger.info("User registered", user_id=str(user.uuid))
        return user

    async def authenticate_user(self, username: str, password: str) -> UserDB:
        """
        Check a username and password.

        A stored hash that uses outdated parameters is replaced on success.

        Raises:
            InvalidCredentialsError: If the user is unknown or the password is wrong
        """
        user = await self.user_repo.get_by_username(username)
        is_valid, new_hash = await verify_and_update_password(
            password,
            user.password_hash if user else None,
        )
        if not user or not is_valid:
            raise InvalidCredentialsError

        if new_hash:
            user.password_hash = new_hash
            await self.user_repo.save_user(user)

        return user

    def create_token_for_user(self, user: UserDB) -> LoginResponse:
        """Issue an access token for an authenticated user."""
        token = create_access_token(
            user_id=user.uuid,
            username=user.username,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        )
        return LoginResponse(token=token, username=user.username, name=user.name)

    async def login(self, username: str, password: str) -> LoginResponse:
        user = await self.authenticate_user(username, password)
        logger.info("User logged in", user_id=str(user.uuid))
        return self.create_token_for_user(user)

"""
Argon2id password hashing on top of passlib's CryptContext.

Hashes are produced with argon2. pbkdf2_sha256 hashes still verify but are
marked deprecated, so a successful login replaces them with an argon2 hash.
Hashing is CPU bound; the coroutines at the bottom hand the work to a small
thread pool.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from bloglist.configs import CONFIG_MAP, settings
from bloglist.decorators import with_retry
from bloglist.errors import PasswordHashingError, PasswordRehashError
from bloglist.monitoring import get_logger

executor = ThreadPoolExecutor(max_workers=4)
logger = get_logger(__name__)


class PasswordHasher:
    """Hash and check user passwords at a configured Argon2 cost level."""

    def __init__(self, level: str | None = None) -> None:
        self.level = level or settings.PASSWORD_SECURITY_LEVEL
        params = CONFIG_MAP[self.level]
        self.pwd_context = CryptContext(
            schemes=["argon2", "pbkdf2_sha256"],
            deprecated="pbkdf2_sha256",
            argon2__memory_cost=params.memory_cost,
            argon2__time_cost=params.time_cost,
            argon2__parallelism=params.parallelism,
        )

    def hash(self, password: str) -> str:
        """
        Hash a registration password.

        Raises:
            PasswordHashingError: If the argon2 backend fails
        """
        try:
            return self.pwd_context.hash(password)
        except (ValueError, InternalBackendError) as e:
            logger.exception("Password hashing failed", level=self.level)
            raise PasswordHashingError from e

    def verify(self, password: str, hashed_password: str) -> bool:
        """Check a login password; a blank or unreadable stored hash never matches."""
        if not hashed_password.strip():
            return False
        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            logger.warning("Stored password hash could not be parsed")
            return False

    def verify_and_update(
        self,
        password: str,
        hashed_password: str | None,
    ) -> tuple[bool, str | None]:
        """
        Check a login password and upgrade its hash when it is outdated.

        Args:
            password: Password from the login request
            hashed_password: The user's stored hash, None for an unknown username

        Returns:
            tuple[bool, str | None]: whether the password matched, and the
                replacement hash when the stored one uses an old scheme or cost

        Raises:
            PasswordRehashError: If the password matched but rehashing failed
        """
        if hashed_password is None:
            # Unknown usernames take as long as wrong passwords
            self.pwd_context.dummy_verify()
            return False, None

        if not self.verify(password, hashed_password):
            return False, None

        if not self.pwd_context.needs_update(hashed_password):
            return True, None

        try:
            new_hash = self.hash(password)
        except PasswordHashingError as e:
            raise PasswordRehashError from e
        logger.info("Outdated password hash replaced", level=self.level)
        return True, new_hash


_default_hasher: PasswordHasher | None = None


def get_password_hasher() -> PasswordHasher:
    """Return the process-wide password hasher, creating it on first use."""
    global _default_hasher  # noqa: PLW0603
    if _default_hasher is None:
        _default_hasher = PasswordHasher()
    return _default_hasher


@with_retry(PasswordHashingError, base_delay=1, max_delay=10)
async def hash_password(password: str) -> str:
    """Hash a password in the worker pool, retrying backend failures."""
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def verify_and_update_password(
    password: str,
    hashed_password: str | None,
) -> tuple[bool, str | None]:
    """Run :meth:`PasswordHasher.verify_and_update` in the worker pool."""
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify_and_update,
        password,
        hashed_password,
    )

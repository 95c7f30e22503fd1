"""User repository for database operations."""

from datetime import UTC, datetime

from bloglist.errors.database import DuplicateEntryError
from bloglist.models.user import UserDB
from bloglist.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserDB]):
    """User table access; users are keyed by ``uuid``."""

    model = UserDB
    id_field = "uuid"

    async def get_by_username(self, username: str) -> UserDB | None:
        return await self._first_where(UserDB.username, username)

    async def create_user(self, username: str, name: str | None, password_hash: str) -> UserDB:
        """
        Insert a new user with no blogs.

        Raises:
            DuplicateEntryError: If the username is already taken
        """
        if await self.get_by_username(username):
            mssg = "Username must be unique"
            raise DuplicateEntryError(mssg)

        db_user = UserDB(username=username, name=name, password_hash=password_hash, blog_ids=[])
        return await self._add_and_refresh(db_user)

    async def save_user(self, user: UserDB) -> UserDB:
        """Flush changes made to a loaded user."""
        user.updated_at = datetime.now(tz=UTC)
        return await self._add_and_refresh(user)

"""
Storage interfaces the services depend on.

``BlogRepository`` and ``UserRepository`` implement these over an async
SQLAlchemy session; any object with the same methods (an in-memory fake in
tests, for instance) can stand in for them.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable
from uuid import UUID

from bloglist.models import BlogDB, UserDB
from bloglist.schemas.blog import BlogCreate, BlogUpdate


@runtime_checkable
class BlogStore(Protocol):
    """Persistence operations on blogs."""

    async def get_by_id(self, record_id: UUID) -> BlogDB | None:
        """Return the blog with this id, or None."""
        ...

    async def get_all(self) -> list[BlogDB]:
        """Return every blog, oldest first."""
        ...

    async def get_by_ids(self, record_ids: Sequence[UUID]) -> list[BlogDB]:
        """Return the blogs whose ids are listed; unknown ids are skipped."""
        ...

    async def create(self, blog: BlogCreate, user_id: UUID) -> BlogDB:
        """Insert a blog owned by ``user_id``."""
        ...

    async def update(self, record_id: UUID, schema: BlogUpdate) -> BlogDB | None:
        """Apply the fields set on ``schema``; None if the blog is gone."""
        ...

    async def delete(self, record_id: UUID) -> bool:
        """Delete a blog; False if it did not exist."""
        ...

    async def commit(self) -> None:
        """Make the pending blog mutation durable."""
        ...


@runtime_checkable
class UserStore(Protocol):
    """Persistence operations on users."""

    async def get_by_id(self, record_id: UUID) -> UserDB | None: ...

    async def get_by_ids(self, record_ids: Sequence[UUID]) -> list[UserDB]: ...

    async def get_by_username(self, username: str) -> UserDB | None: ...

    async def get_all(self) -> list[UserDB]: ...

    async def create_user(self, username: str, name: str | None, password_hash: str) -> UserDB:
        """
        Insert a user.

        Raises:
            DuplicateEntryError: If the username is taken
        """
        ...

    async def save_user(self, user: UserDB) -> UserDB:
        """Persist changes made to a loaded user (its ``blog_ids`` in particular)."""
        ...

# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Settings are read when bloglist is first imported
os.environ["ENVIRONMENT"] = "test"
os.environ["PASSWORD_SECURITY_LEVEL"] = "low"
os.environ["SECRET_KEY"] = "test-secret-key-for-bloglist-tests"
os.environ["LIMITER_ENABLED"] = "false"

from collections.abc import Sequence  # noqa: E402
from uuid import UUID  # noqa: E402

from pytest import fixture  # noqa: E402

from bloglist.errors.database import DuplicateEntryError  # noqa: E402
from bloglist.models import BlogDB, UserDB  # noqa: E402
from bloglist.schemas.blog import BlogCreate, BlogUpdate  # noqa: E402

DUMMY_HASH = "$argon2id$v=19$m=65536,t=3,p=4$somehash"


class InMemoryBlogStore:
    """Dict-backed implementation of the blog store protocol."""

    def __init__(self) -> None:
        self.blogs: dict[UUID, BlogDB] = {}
        self.commits = 0

    async def get_by_id(self, record_id: UUID) -> BlogDB | None:
        return self.blogs.get(record_id)

    async def get_all(self) -> list[BlogDB]:
        return list(self.blogs.values())

    async def get_by_ids(self, record_ids: Sequence[UUID]) -> list[BlogDB]:
        return [self.blogs[record_id] for record_id in record_ids if record_id in self.blogs]

    async def create(self, blog: BlogCreate, user_id: UUID) -> BlogDB:
        db_blog = BlogDB(
            user_id=user_id,
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes,
        )
        self.blogs[db_blog.id] = db_blog
        return db_blog

    async def update(self, record_id: UUID, schema: BlogUpdate) -> BlogDB | None:
        blog = self.blogs.get(record_id)
        if blog is None:
            return None
        for key, value in schema.model_dump(exclude_unset=True).items():
            setattr(blog, key, value)
        return blog

    async def delete(self, record_id: UUID) -> bool:
        return self.blogs.pop(record_id, None) is not None

    async def commit(self) -> None:
        self.commits += 1


class InMemoryUserStore:
    """Dict-backed implementation of the user store protocol."""

    def __init__(self) -> None:
        self.users: dict[UUID, UserDB] = {}
        self.saves = 0

    def add(self, user: UserDB) -> UserDB:
        self.users[user.uuid] = user
        return user

    async def get_by_id(self, record_id: UUID) -> UserDB | None:
        return self.users.get(record_id)

    async def get_by_ids(self, record_ids: Sequence[UUID]) -> list[UserDB]:
        return [self.users[record_id] for record_id in record_ids if record_id in self.users]

    async def get_by_username(self, username: str) -> UserDB | None:
        return next((user for user in self.users.values() if user.username == username), None)

    async def get_all(self) -> list[UserDB]:
        return list(self.users.values())

    async def create_user(self, username: str, name: str | None, password_hash: str) -> UserDB:
        if await self.get_by_username(username):
            mssg = "Username must be unique"
            raise DuplicateEntryError(mssg)
        return self.add(UserDB(username=username, name=name, password_hash=password_hash, blog_ids=[]))

    async def save_user(self, user: UserDB) -> UserDB:
        self.saves += 1
        return self.add(user)


@fixture
def blog_store() -> InMemoryBlogStore:
    return InMemoryBlogStore()


@fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@fixture
def owner(user_store: InMemoryUserStore) -> UserDB:
    """User U1, who owns the blogs created in tests."""
    return user_store.add(
        UserDB(username="mluukkai", name="Matti Luukkainen", password_hash=DUMMY_HASH, blog_ids=[]),
    )


@fixture
def other_user(user_store: InMemoryUserStore) -> UserDB:
    """User U2, who owns nothing."""
    return user_store.add(
        UserDB(username="hellas", name="Arto Hellas", password_hash=DUMMY_HASH, blog_ids=[]),
    )

"""Tests for blog orchestration over in-memory stores."""

from uuid import uuid4

import pytest

import bloglist.services.blog as blog_module
from bloglist.auth import ALLOW
from bloglist.errors import (
    BlogNotFoundError,
    DatabaseError,
    ForbiddenError,
    UnauthenticatedError,
)
from bloglist.models import UserDB
from bloglist.schemas import BlogCreate, BlogUpdate
from bloglist.services import BlogService


def _new_blog(**overrides: object) -> BlogCreate:
    data = {"title": "React patterns", "author": "Michael Chan", "url": "https://reactpatterns.com/"}
    data.update(overrides)
    return BlogCreate.model_validate(data)


class TestCreateBlog:
    async def test_creates_blog_and_records_it_on_owner(
        self,
        blog_service: BlogService,
        blog_store,  # noqa: ANN001
        owner: UserDB,
    ) -> None:
        created = await blog_service.create_blog(owner, _new_blog())

        assert created.likes == 0
        assert created.user is not None
        assert created.user.id == owner.uuid
        assert created.user.username == "mluukkai"
        assert owner.blog_ids == [str(created.id)]
        assert created.id in blog_store.blogs

    async def test_unauthenticated_creation_is_rejected(
        self,
        blog_service: BlogService,
        blog_store,  # noqa: ANN001
    ) -> None:
        with pytest.raises(UnauthenticatedError):
            await blog_service.create_blog(None, _new_blog())
        assert blog_store.blogs == {}

    async def test_admitted_without_caller_still_raises_401(
        self,
        blog_service: BlogService,
        blog_store,  # noqa: ANN001
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(blog_module, "authorize_creation", lambda user_id: ALLOW)

        with pytest.raises(UnauthenticatedError):
            await blog_service.create_blog(None, _new_blog())
        assert blog_store.blogs == {}

    async def test_blog_commit_precedes_owner_update(
        self,
        blog_service: BlogService,
        blog_store,  # noqa: ANN001
        user_store,  # noqa: ANN001
        owner: UserDB,
    ) -> None:
        """A failure while saving the owner leaves the committed blog in place."""

        async def failing_save(user: UserDB) -> UserDB:
            raise DatabaseError

        user_store.save_user = failing_save

        with pytest.raises(DatabaseError):
            await blog_service.create_blog(owner, _new_blog())

        assert blog_store.commits == 1
        assert len(blog_store.blogs) == 1


class TestUpdateBlog:
    async def test_owner_can_update(self, blog_service: BlogService, owner: UserDB) -> None:
        created = await blog_service.create_blog(owner, _new_blog(likes=3))

        updated = await blog_service.update_blog(owner, created.id, BlogUpdate(likes=4))

        assert updated.likes == 4
        assert updated.title == "React patterns"

    async def test_non_owner_is_forbidden(
        self,
        blog_service: BlogService,
        owner: UserDB,
        other_user: UserDB,
    ) -> None:
        created = await blog_service.create_blog(owner, _new_blog())

        with pytest.raises(ForbiddenError):
            await blog_service.update_blog(other_user, created.id, BlogUpdate(likes=99))

    async def test_missing_blog_is_not_found(self, blog_service: BlogService, owner: UserDB) -> None:
        with pytest.raises(BlogNotFoundError):
            await blog_service.update_blog(owner, uuid4(), BlogUpdate(likes=1))

    async def test_unauthenticated_update_is_rejected(
        self,
        blog_service: BlogService,
        owner: UserDB,
    ) -> None:
        created = await blog_service.create_blog(owner, _new_blog())

        with pytest.raises(UnauthenticatedError):
            await blog_service.update_blog(None, created.id, BlogUpdate(likes=1))


class TestDeleteBlog:
    async def test_ownership_scenario(
        self,
        blog_service: BlogService,
        blog_store,  # noqa: ANN001
        owner: UserDB,
        other_user: UserDB,
    ) -> None:
        """U2 cannot delete U1's blog; U1 can, and the id leaves U1's blog list."""
        created = await blog_service.create_blog(owner, _new_blog())
        assert str(created.id) in owner.blog_ids

        with pytest.raises(ForbiddenError):
            await blog_service.delete_blog(other_user, created.id)
        assert created.id in blog_store.blogs

        await blog_service.delete_blog(owner, created.id)

        assert created.id not in blog_store.blogs
        assert str(created.id) not in owner.blog_ids

    async def test_delete_keeps_other_blog_ids(self, blog_service: BlogService, owner: UserDB) -> None:
        first = await blog_service.create_blog(owner, _new_blog(title="first"))
        second = await blog_service.create_blog(owner, _new_blog(title="second"))

        await blog_service.delete_blog(owner, first.id)

        assert owner.blog_ids == [str(second.id)]

    async def test_missing_blog_is_not_found(self, blog_service: BlogService, owner: UserDB) -> None:
        with pytest.raises(BlogNotFoundError):
            await blog_service.delete_blog(owner, uuid4())

    async def test_unauthenticated_delete_is_rejected(
        self,
        blog_service: BlogService,
        owner: UserDB,
    ) -> None:
        created = await blog_service.create_blog(owner, _new_blog())

        with pytest.raises(UnauthenticatedError):
            await blog_service.delete_blog(None, created.id)


class TestReadBlogs:
    async def test_list_populates_owner(
        self,
        blog_service: BlogService,
        owner: UserDB,
        other_user: UserDB,
    ) -> None:
        await blog_service.create_blog(owner, _new_blog(title="one"))
        await blog_service.create_blog(other_user, _new_blog(title="two"))

        listed = await blog_service.list_blogs()

        assert [(blog.title, blog.user.username if blog.user else None) for blog in listed] == [
            ("one", "mluukkai"),
            ("two", "hellas"),
        ]

    async def test_get_missing_blog_raises(self, blog_service: BlogService) -> None:
        with pytest.raises(BlogNotFoundError):
            await blog_service.get_blog(uuid4())

    async def test_stats_over_stored_blogs(self, blog_service: BlogService, owner: UserDB) -> None:
        await blog_service.create_blog(owner, _new_blog(author="A", likes=5))
        await blog_service.create_blog(owner, _new_blog(author="B", likes=7))
        await blog_service.create_blog(owner, _new_blog(author="A", likes=10))

        stats = await blog_service.get_stats()

        assert stats.total_likes == 22
        assert stats.favorite_blog is not None
        assert stats.favorite_blog.likes == 10
        assert stats.most_blogs is not None
        assert stats.most_blogs.author == "A"
        assert stats.most_likes is not None
        assert stats.most_likes.likes == 15

    async def test_stats_without_blogs(self, blog_service: BlogService) -> None:
        stats = await blog_service.get_stats()
        assert stats.total_likes == 0
        assert stats.favorite_blog is None

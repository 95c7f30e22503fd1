"""Tests for user listing."""

from bloglist.models import UserDB
from bloglist.schemas import BlogCreate
from bloglist.services import BlogService, UserService


async def test_users_listed_with_their_blogs(
    blog_service: BlogService,
    user_service: UserService,
    owner: UserDB,
    other_user: UserDB,
) -> None:
    blog = await blog_service.create_blog(
        owner,
        BlogCreate(title="Type wars", author="Robert C. Martin", url="http://blog.cleancoder.com/"),
    )

    users = {user.username: user for user in await user_service.list_users()}

    assert [entry.id for entry in users["mluukkai"].blogs] == [blog.id]
    assert users["mluukkai"].blogs[0].url == "http://blog.cleancoder.com/"
    assert users["hellas"].blogs == []


async def test_stale_blog_ids_are_skipped(user_service: UserService, owner: UserDB) -> None:
    owner.blog_ids = ["00000000-0000-0000-0000-000000000000"]

    users = await user_service.list_users()

    assert users[0].blogs == []

"""User listing."""

from uuid import UUID

from bloglist.repositories.protocols import BlogStore, UserStore
from bloglist.schemas.user import UserResponse


class UserService:
    """Read-side user operations."""

    def __init__(self, user_repo: UserStore, blog_repo: BlogStore) -> None:
        self.user_repo = user_repo
        self.blog_repo = blog_repo

    async def list_users(self) -> list[UserResponse]:
        """All users, each with the blogs listed in ``blog_ids`` populated."""
        users = await self.user_repo.get_all()
        blog_ids = {UUID(bid) for user in users for bid in user.blog_ids}
        blogs = {str(blog.id): blog for blog in await self.blog_repo.get_by_ids(list(blog_ids))}
        return [
            UserResponse.from_db(user, [blogs[bid] for bid in user.blog_ids if bid in blogs])
            for user in users
        ]

"""Blog table access."""

from datetime import UTC, datetime
from uuid import UUID

from bloglist.models.blog import BlogDB
from bloglist.repositories.base import BaseRepository
from bloglist.schemas.blog import BlogCreate, BlogUpdate


class BlogRepository(BaseRepository[BlogDB]):
    model = BlogDB

    async def create(self, blog: BlogCreate, user_id: UUID) -> BlogDB:
        """
        Insert a new blog owned by ``user_id``.

        Raises:
            DatabaseError: If the insert fails
        """
        db_blog = BlogDB(
            user_id=user_id,
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes,
        )
        return await self._add_and_refresh(db_blog)

    async def update(self, blog_id: UUID, changes: BlogUpdate) -> BlogDB | None:
        """
        Apply the fields the client actually sent.

        Returns:
            BlogDB | None: The updated blog, None if it does not exist
        """
        blog = await self.get_by_id(blog_id)
        if blog is None:
            return None

        for field, value in changes.model_dump(exclude_unset=True).items():
            setattr(blog, field, value)
        blog.updated_at = datetime.now(tz=UTC)
        return await self._add_and_refresh(blog)

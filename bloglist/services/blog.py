"""
Blog CRUD orchestration.

Every mutation runs the ownership guard first and turns a denial into the
matching :class:`~bloglist.errors.ownership.BlogAccessError`. After an
allowed create or delete, the owner's ``blog_ids`` list is updated in a
second step. The blog change is committed before that step starts, so a
failure while saving the owner leaves the blog change in place.
"""

from uuid import UUID

from bloglist.auth.ownership import Decision, authorize_creation, authorize_mutation
from bloglist.errors.ownership import BlogNotFoundError, UnauthenticatedError, error_for_decision
from bloglist.models import BlogDB, UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories.protocols import BlogStore, UserStore
from bloglist.schemas.blog import BlogCreate, BlogResponse, BlogUpdate
from bloglist.schemas.stats import BlogStats
from bloglist.services.list_helper import summarize

logger = get_logger(__name__)


def _user_id(user: UserDB | None) -> UUID | None:
    return user.uuid if user else None


def _authorized_user(decision: Decision, user: UserDB | None) -> UserDB:
    """Return the caller the guard admitted, or raise the denial."""
    if not decision.allowed:
        raise error_for_decision(decision)
    if user is None:
        raise UnauthenticatedError
    return user


class BlogService:
    """Blog operations on top of the blog and user stores."""

    def __init__(self, blog_repo: BlogStore, user_repo: UserStore) -> None:
        self.blog_repo = blog_repo
        self.user_repo = user_repo

    async def _with_owners(self, blogs: list[BlogDB]) -> list[BlogResponse]:
        owner_ids = list({blog.user_id for blog in blogs})
        owners = {user.uuid: user for user in await self.user_repo.get_by_ids(owner_ids)}
        return [BlogResponse.from_db(blog, owners.get(blog.user_id)) for blog in blogs]

    async def list_blogs(self) -> list[BlogResponse]:
        """All blogs, each with its owner populated."""
        return await self._with_owners(await self.blog_repo.get_all())

    async def get_blog(self, blog_id: UUID) -> BlogResponse:
        """
        One blog with its owner populated.

        Raises:
            BlogNotFoundError: If no blog has this id
        """
        blog = await self.blog_repo.get_by_id(blog_id)
        if blog is None:
            raise BlogNotFoundError
        owner = await self.user_repo.get_by_id(blog.user_id)
        return BlogResponse.from_db(blog, owner)

    async def get_stats(self) -> BlogStats:
        """Like and author statistics over every stored blog."""
        blogs = await self.blog_repo.get_all()
        return BlogStats.model_validate(summarize(blogs))

    async def create_blog(self, current_user: UserDB | None, data: BlogCreate) -> BlogResponse:
        """
        Create a blog owned by the caller and record it on the caller.

        Raises:
            UnauthenticatedError: If there is no caller
        """
        owner = _authorized_user(authorize_creation(_user_id(current_user)), current_user)

        blog = await self.blog_repo.create(data, owner.uuid)
        await self.blog_repo.commit()
        logger.info("Blog created", blog_id=str(blog.id), user_id=str(owner.uuid))

        owner.blog_ids = [*owner.blog_ids, str(blog.id)]
        await self.user_repo.save_user(owner)

        return BlogResponse.from_db(blog, owner)

    async def update_blog(
        self,
        current_user: UserDB | None,
        blog_id: UUID,
        data: BlogUpdate,
    ) -> BlogResponse:
        """
        Update a blog the caller owns and return the updated document.

        Raises:
            UnauthenticatedError: If there is no caller
            BlogNotFoundError: If the blog does not exist
            ForbiddenError: If the caller does not own the blog
        """
        blog = await self.blog_repo.get_by_id(blog_id) if current_user else None
        owner = _authorized_user(authorize_mutation(_user_id(current_user), blog), current_user)

        updated = await self.blog_repo.update(blog_id, data)
        if updated is None:
            raise BlogNotFoundError
        await self.blog_repo.commit()
        logger.info("Blog updated", blog_id=str(blog_id), fields=sorted(data.model_fields_set))

        return BlogResponse.from_db(updated, owner)

    async def delete_blog(self, current_user: UserDB | None, blog_id: UUID) -> None:
        """
        Delete a blog the caller owns and drop it from the caller's blog list.

        Raises:
            UnauthenticatedError: If there is no caller
            BlogNotFoundError: If the blog does not exist
            ForbiddenError: If the caller does not own the blog
        """
        blog = await self.blog_repo.get_by_id(blog_id) if current_user else None
        owner = _authorized_user(authorize_mutation(_user_id(current_user), blog), current_user)

        if not await self.blog_repo.delete(blog_id):
            raise BlogNotFoundError
        await self.blog_repo.commit()
        logger.info("Blog deleted", blog_id=str(blog_id), user_id=str(owner.uuid))

        owner.blog_ids = [bid for bid in owner.blog_ids if bid != str(blog_id)]
        await self.user_repo.save_user(owner)

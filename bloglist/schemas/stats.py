"""Aggregate statistics over the blog collection."""

from pydantic import BaseModel


class FavoriteBlog(BaseModel):
    title: str | None = None
    author: str | None = None
    likes: int


class AuthorBlogCount(BaseModel):
    author: str | None = None
    blogs: int


class AuthorLikes(BaseModel):
    author: str | None = None
    likes: int


class BlogStats(BaseModel):
    """Summary returned by ``GET /api/blogs/stats``."""

    total_likes: int
    favorite_blog: FavoriteBlog | None = None
    most_blogs: AuthorBlogCount | None = None
    most_likes: AuthorLikes | None = None

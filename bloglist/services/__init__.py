from bloglist.services.auth import AuthService
from bloglist.services.blog import BlogService
from bloglist.services.list_helper import (
    favorite_blog,
    most_blogs,
    most_likes,
    summarize,
    total_likes,
)
from bloglist.services.user import UserService

__all__ = [
    "AuthService",
    "BlogService",
    "UserService",
    "favorite_blog",
    "most_blogs",
    "most_likes",
    "summarize",
    "total_likes",
]

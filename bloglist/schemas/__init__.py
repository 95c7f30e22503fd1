from bloglist.schemas.auth import LoginRequest, LoginResponse, TokenData
from bloglist.schemas.blog import BlogCreate, BlogOwner, BlogResponse, BlogUpdate
from bloglist.schemas.stats import AuthorBlogCount, AuthorLikes, BlogStats, FavoriteBlog
from bloglist.schemas.user import UserBlog, UserCreate, UserResponse

__all__ = [
    "AuthorBlogCount",
    "AuthorLikes",
    "BlogCreate",
    "BlogOwner",
    "BlogResponse",
    "BlogStats",
    "BlogUpdate",
    "FavoriteBlog",
    "LoginRequest",
    "LoginResponse",
    "TokenData",
    "UserBlog",
    "UserCreate",
    "UserResponse",
]

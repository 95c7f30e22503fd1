"""User request and response schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from bloglist.configs.settings import (
    MAX_NAME_LENGTH,
    MAX_USERNAME_LENGTH,
    MIN_PASSWORD_LENGTH,
    MIN_USERNAME_LENGTH,
)
from bloglist.models import BlogDB, UserDB


class UserCreate(BaseModel):
    """User registration model (request body)."""

    model_config = ConfigDict(str_strip_whitespace=True)

    username: str = Field(
        ...,
        min_length=MIN_USERNAME_LENGTH,
        max_length=MAX_USERNAME_LENGTH,
        description="Username",
        examples=["mluukkai"],
    )
    name: str | None = Field(
        default=None,
        max_length=MAX_NAME_LENGTH,
        description="Display name",
        examples=["Matti Luukkainen"],
    )
    password: SecretStr = Field(
        ...,
        min_length=MIN_PASSWORD_LENGTH,
        description="Password",
        examples=["salainen"],
    )


class UserBlog(BaseModel):
    """Blog summary embedded in user responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    url: str
    title: str
    author: str | None = None


class UserResponse(BaseModel):
    """User response; never carries the password hash."""

    id: UUID
    username: str
    name: str | None = None
    blogs: list[UserBlog] = Field(default_factory=list)

    @classmethod
    def from_db(cls, user: UserDB, blogs: list[BlogDB] | None = None) -> "UserResponse":
        """Build a response from a user row and the blogs it owns."""
        return cls(
            id=user.uuid,
            username=user.username,
            name=user.name,
            blogs=[UserBlog.model_validate(blog) for blog in blogs or []],
        )

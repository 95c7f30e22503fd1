"""
Blog request and response schemas.

Request bodies are validated here; a missing ``title`` or ``url`` fails
validation and is reported as a 400 by the validation error handler.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bloglist.configs.settings import MAX_AUTHOR_LENGTH, MAX_TITLE_LENGTH, MAX_URL_LENGTH
from bloglist.models import BlogDB, UserDB


class BlogOwner(BaseModel):
    """Owning user embedded in blog responses (without sensitive data)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None


class BlogCreate(BaseModel):
    """Blog creation model (request body)."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TITLE_LENGTH,
        description="Blog title",
        examples=["React patterns"],
    )
    author: str | None = Field(
        default=None,
        max_length=MAX_AUTHOR_LENGTH,
        description="Author of the linked post",
        examples=["Michael Chan"],
    )
    url: str = Field(
        ...,
        min_length=1,
        max_length=MAX_URL_LENGTH,
        description="Link to the post",
        examples=["https://reactpatterns.com/"],
    )
    likes: int = Field(default=0, ge=0, description="Like count")


class BlogUpdate(BaseModel):
    """Blog update model; every field is optional but none may be blanked."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(default=None, min_length=1, max_length=MAX_TITLE_LENGTH)
    author: str | None = Field(default=None, max_length=MAX_AUTHOR_LENGTH)
    url: str | None = Field(default=None, min_length=1, max_length=MAX_URL_LENGTH)
    likes: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def required_fields_not_null(self) -> "BlogUpdate":
        """Reject an explicit null for fields the blog cannot lose."""
        for field in ("title", "url", "likes"):
            if field in self.model_fields_set and getattr(self, field) is None:
                mssg = f"{field} cannot be null"
                raise ValueError(mssg)
        return self


class BlogResponse(BaseModel):
    """Blog response with the owning user populated."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int = 0
    user: BlogOwner | None = None

    @classmethod
    def from_db(cls, blog: BlogDB, owner: UserDB | None = None) -> "BlogResponse":
        """Build a response from a blog row and, when known, its owner."""
        return cls(
            id=blog.id,
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes,
            user=BlogOwner(id=owner.uuid, username=owner.username, name=owner.name) if owner else None,
        )

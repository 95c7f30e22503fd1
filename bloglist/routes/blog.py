"""
Blog Routes.

Summary
-------
Endpoints include:
  - List blogs (with the owning user populated)
  - Blog statistics
  - Get blog by id
  - Create blog
  - Update blog
  - Delete blog

Authorization
-------------
Create, update and delete take the caller from `CurrentUserDep`, declared
ahead of the body and the blog id: a missing or invalid token is answered
with 401 before either is validated. Update and delete are further
restricted to the blog's owner (403), after checking that the blog exists
(404).
"""

from uuid import UUID

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from bloglist.dependencies import BlogServiceDep, CurrentUserDep
from bloglist.schemas import BlogCreate, BlogResponse, BlogStats, BlogUpdate

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

UNAUTHENTICATED_RESPONSE = {
    "description": "Unauthorized",
    "content": {"application/json": {"example": {"detail": "User missing or invalid"}}},
}
NOT_FOUND_RESPONSE = {
    "description": "Not found",
    "content": {"application/json": {"example": {"detail": "Blog not found"}}},
}
FORBIDDEN_RESPONSE = {
    "description": "Forbidden",
    "content": {"application/json": {"example": {"detail": "Permission denied"}}},
}
VALIDATION_RESPONSE = {
    "description": "Bad request",
    "content": {
        "application/json": {
            "example": {
                "detail": "Validation failed",
                "errors": [{"field": "url", "message": "Field required", "type": "missing"}],
            },
        },
    },
}


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogResponse],
    summary="List blogs",
    description="Return every blog with its owning user's id, username and name.",
    operation_id="blogs_list",
)
async def list_blogs(service: BlogServiceDep) -> list[BlogResponse]:
    return await service.list_blogs()


@router.get(
    "/stats",
    response_class=ORJSONResponse,
    response_model=BlogStats,
    summary="Blog statistics",
    description="Total likes, the favorite blog, and the authors with the most blogs and likes.",
    operation_id="blogs_stats",
)
async def blog_stats(service: BlogServiceDep) -> BlogStats:
    return await service.get_stats()


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by ID",
    responses={404: NOT_FOUND_RESPONSE},
    operation_id="blogs_get",
)
async def get_blog(blog_id: UUID, service: BlogServiceDep) -> BlogResponse:
    return await service.get_blog(blog_id)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog",
    description="Create a blog owned by the authenticated user. `likes` defaults to 0.",
    responses={400: VALIDATION_RESPONSE, 401: UNAUTHENTICATED_RESPONSE},
    operation_id="blogs_create",
)
async def create_blog(
    current_user: CurrentUserDep,
    blog: BlogCreate,
    service: BlogServiceDep,
) -> BlogResponse:
    """
    Create a blog.

    Parameters
    ----------
    current_user : UserDB
        User resolved from the bearer token.
    blog : BlogCreate
        Title and url are required.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    BlogResponse
        The created blog with its owner populated.
    """
    return await service.create_blog(current_user, blog)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Update blog",
    description="Update title, author, url or likes of a blog the caller owns.",
    responses={
        400: VALIDATION_RESPONSE,
        401: UNAUTHENTICATED_RESPONSE,
        403: FORBIDDEN_RESPONSE,
        404: NOT_FOUND_RESPONSE,
    },
    operation_id="blogs_update",
)
async def update_blog(
    current_user: CurrentUserDep,
    blog_id: UUID,
    blog: BlogUpdate,
    service: BlogServiceDep,
) -> BlogResponse:
    return await service.update_blog(current_user, blog_id, blog)


@router.delete(
    "/{blog_id}",
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete blog",
    description="Delete a blog the caller owns.",
    responses={
        204: {"description": "No Content"},
        401: UNAUTHENTICATED_RESPONSE,
        403: FORBIDDEN_RESPONSE,
        404: NOT_FOUND_RESPONSE,
    },
    operation_id="blogs_delete",
)
async def delete_blog(
    current_user: CurrentUserDep,
    blog_id: UUID,
    service: BlogServiceDep,
) -> Response:
    await service.delete_blog(current_user, blog_id)
    return Response(status_code=HTTP_204_NO_CONTENT)

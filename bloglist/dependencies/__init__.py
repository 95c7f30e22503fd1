from bloglist.dependencies.dependencies import (
    AuthServiceDep,
    BlogRepoDep,
    BlogServiceDep,
    CurrentUserDep,
    OptionalUserDep,
    UserRepoDep,
    UserServiceDep,
    get_auth_service,
    get_blog_repository,
    get_blog_service,
    get_optional_user,
    get_user_repository,
    get_user_service,
    oauth2_scheme,
    require_user,
)

__all__ = [
    "AuthServiceDep",
    "BlogRepoDep",
    "BlogServiceDep",
    "CurrentUserDep",
    "OptionalUserDep",
    "UserRepoDep",
    "UserServiceDep",
    "get_auth_service",
    "get_blog_repository",
    "get_blog_service",
    "get_optional_user",
    "get_user_repository",
    "get_user_service",
    "oauth2_scheme",
    "require_user",
]

"""Fixtures for service tests."""

from pytest import fixture

from bloglist.services import AuthService, BlogService, UserService


@fixture
def blog_service(blog_store, user_store) -> BlogService:  # noqa: ANN001
    return BlogService(blog_store, user_store)


@fixture
def user_service(blog_store, user_store) -> UserService:  # noqa: ANN001
    return UserService(user_store, blog_store)


@fixture
def auth_service(user_store) -> AuthService:  # noqa: ANN001
    return AuthService(user_store)


@fixture
def blogs() -> list[dict]:
    """The classic six-blog fixture."""
    return [
        {"title": "React patterns", "author": "Michael Chan", "url": "https://reactpatterns.com/", "likes": 7},
        {
            "title": "Go To Statement Considered Harmful",
            "author": "Edsger W. Dijkstra",
            "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
            "likes": 5,
        },
        {
            "title": "Canonical string reduction",
            "author": "Edsger W. Dijkstra",
            "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
            "likes": 12,
        },
        {
            "title": "First class tests",
            "author": "Robert C. Martin",
            "url": "http://blog.cleancoder.com/uncle-bob/2017/05/05/TestDefinitions.htmll",
            "likes": 10,
        },
        {
            "title": "TDD harms architecture",
            "author": "Robert C. Martin",
            "url": "http://blog.cleancoder.com/uncle-bob/2017/03/03/TDD-Harms-Architecture.html",
            "likes": 0,
        },
        {
            "title": "Type wars",
            "author": "Robert C. Martin",
            "url": "http://blog.cleancoder.com/uncle-bob/2016/05/01/TypeWars.html",
            "likes": 2,
        },
    ]

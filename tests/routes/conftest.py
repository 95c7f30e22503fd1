# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator, Callable
from datetime import timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from bloglist.dependencies import get_blog_repository, get_user_repository
from bloglist.main import app
from bloglist.managers.rate_limiter import limiter
from bloglist.managers.token_manager import create_access_token
from bloglist.models import UserDB


def _bearer(user: UserDB) -> dict[str, str]:
    token = create_access_token(
        user_id=user.uuid,
        username=user.username,
        expires_delta=timedelta(minutes=30),
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_auth_headers() -> Callable[[UserDB], dict[str, str]]:
    return _bearer


@pytest.fixture
def auth_headers(owner: UserDB) -> dict[str, str]:
    """Bearer header for the blog owner."""
    return _bearer(owner)


@pytest.fixture
def other_auth_headers(other_user: UserDB) -> dict[str, str]:
    return _bearer(other_user)


@pytest.fixture
async def client(blog_store, user_store) -> AsyncGenerator[AsyncClient]:  # noqa: ANN001
    """HTTP client against the app with in-memory stores in place of the database."""
    limiter.enabled = False
    app.dependency_overrides[get_blog_repository] = lambda: blog_store
    app.dependency_overrides[get_user_repository] = lambda: user_store
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    app.dependency_overrides.clear()

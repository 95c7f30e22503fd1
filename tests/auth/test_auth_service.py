"""Tests for registration and login."""

import pytest
from pydantic import SecretStr

from bloglist.errors import InvalidCredentialsError, RegistrationError
from bloglist.managers.token_manager import decode_access_token
from bloglist.schemas import UserCreate
from bloglist.services import AuthService


@pytest.fixture
def auth_service(user_store) -> AuthService:  # noqa: ANN001
    return AuthService(user_store)


def _signup(username: str = "mluukkai", password: str = "salainen") -> UserCreate:
    return UserCreate(username=username, name="Matti Luukkainen", password=SecretStr(password))


class TestRegister:
    async def test_stores_hash_not_password(self, auth_service: AuthService) -> None:
        user = await auth_service.register(_signup())

        assert user.username == "mluukkai"
        assert user.blog_ids == []
        assert user.password_hash != "salainen"
        assert user.password_hash.startswith("$argon2")

    async def test_duplicate_username_is_rejected(self, auth_service: AuthService) -> None:
        await auth_service.register(_signup())

        with pytest.raises(RegistrationError) as exc_info:
            await auth_service.register(_signup(password="another"))

        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "Username must be unique"


class TestLogin:
    async def test_login_returns_token_and_profile(self, auth_service: AuthService) -> None:
        user = await auth_service.register(_signup())

        result = await auth_service.login("mluukkai", "salainen")

        assert result.username == "mluukkai"
        assert result.name == "Matti Luukkainen"
        token_data = decode_access_token(result.token)
        assert token_data is not None
        assert token_data.user_id == str(user.uuid)

    async def test_wrong_password(self, auth_service: AuthService) -> None:
        await auth_service.register(_signup())

        with pytest.raises(InvalidCredentialsError):
            await auth_service.login("mluukkai", "wrong")

    async def test_unknown_user(self, auth_service: AuthService) -> None:
        with pytest.raises(InvalidCredentialsError):
            await auth_service.login("nobody", "salainen")

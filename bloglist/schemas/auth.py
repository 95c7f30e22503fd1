from pydantic import BaseModel, Field, SecretStr


class LoginRequest(BaseModel):
    """Login credentials."""

    username: str = Field(..., min_length=1, examples=["mluukkai"])
    password: SecretStr = Field(..., min_length=1, examples=["salainen"])


class LoginResponse(BaseModel):
    """Token issued on successful login, with the user's public fields."""

    token: str
    username: str
    name: str | None = None


class TokenData(BaseModel):
    """Token data schema for extracted token payload."""

    username: str | None = None
    user_id: str | None = None
    jti: str | None = None

"""Plain data records parsed from the REST payloads."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class Post(BaseModel):
    """A single post as returned by the posts endpoint."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    user_id: int = Field(alias="userId")
    id: int
    title: str
    body: str

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Post":
        """Parse one JSON map.

        Raises:
            ValueError: If the map is missing fields or has wrong types
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object for a post, got {type(data).__name__}")
        return cls.model_validate(data, strict=True)

    @classmethod
    def list_from_json(cls, data: Any) -> List["Post"]:
        """Parse a JSON array of post maps."""
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array of posts, got {type(data).__name__}")
        return [cls.from_json(item) for item in data]

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class LoginRequest(BaseModel):
    """Credentials sent to the login endpoint."""
    model_config = ConfigDict(frozen=True)

    email: str
    password: str

    def to_json(self) -> Dict[str, Any]:
        return {"email": self.email, "password": self.password}


class User(BaseModel):
    """The signed-in user: the email used to log in and the issued token."""
    model_config = ConfigDict(frozen=True)

    email: str
    token: str = Field(min_length=1)

    @classmethod
    def from_login_response(cls, email: str, data: Any) -> "User":
        """Build a user from the login response body.

        Raises:
            ValueError: If the body has no non-empty ``token``
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object for login, got {type(data).__name__}")
        token = data.get("token")
        if not isinstance(token, str):
            raise ValueError("Login response has no token")
        try:
            return cls(email=email, token=token)
        except ValidationError as e:
            raise ValueError(f"Invalid login response: {e}") from e

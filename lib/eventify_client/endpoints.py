from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol
from urllib.parse import quote

from .codec import encode
from .errors import BadURLError
from .http_types import HTTPMethod
from .models import SignInRequest, SignUpRequest, ValidateRequest

JSON_CONTENT_TYPE = "application/json"


class Endpoint(Protocol):
    @property
    def path(self) -> str: ...

    @property
    def method(self) -> HTTPMethod: ...

    @property
    def headers(self) -> dict[str, str]: ...

    @property
    def body(self) -> bytes | None: ...


def path_segment(value: str) -> str:
    """Percent-encode ``value`` so it stays a single, non-empty path segment."""
    if not (value or "").strip():
        raise BadURLError("Path segment is empty")
    encoded = quote(value, safe="")
    if encoded in {".", ".."}:
        encoded = encoded.replace(".", "%2E")
    return encoded


class AuthEndpoint:
    """Base for the auth API operations: JSON POSTs under ``auth/``."""

    payload: Any

    @property
    def method(self) -> HTTPMethod:
        return HTTPMethod.POST

    @property
    def headers(self) -> dict[str, str]:
        return {"Content-Type": JSON_CONTENT_TYPE}

    @property
    def body(self) -> bytes:
        return encode(self.payload)


@dataclass(frozen=True)
class ValidateEmail(AuthEndpoint):
    payload: ValidateRequest

    @property
    def path(self) -> str:
        return "auth/validation"


@dataclass(frozen=True)
class SignUp(AuthEndpoint):
    validation_id: str
    payload: SignUpRequest

    @property
    def path(self) -> str:
        return f"auth/registration/{path_segment(self.validation_id)}"


@dataclass(frozen=True)
class SignIn(AuthEndpoint):
    payload: SignInRequest

    @property
    def path(self) -> str:
        return "auth/login"

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidateRequest:
    email: str
    password: str


@dataclass(frozen=True)
class SignUpRequest:
    email: str
    password: str
    code: str


@dataclass(frozen=True)
class SignInRequest:
    email: str
    password: str


@dataclass(frozen=True)
class AuthorizationResponse:
    """Tokens issued after a successful sign-in or sign-up."""

    user_id: str = field(metadata={"json_key": "userID"})
    access_token: str = field(metadata={"json_key": "accessToken"})
    refresh_token: str = field(metadata={"json_key": "refreshToken"})


@dataclass(frozen=True)
class ValidationResponse:
    """Identifier of a pending registration, used by the sign-up call."""

    validation_id: str = field(metadata={"json_key": "validationId"})

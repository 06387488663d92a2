from __future__ import annotations

import json

from typer.testing import CliRunner

from eventify_client import AuthError, AuthorizationResponse, DecodingError, InvalidResponseError, NetworkError
from eventify_client.models import ValidationResponse
from eventify_cli import main
from eventify_cli.commands import auth_cmd
from eventify_cli.config import AppConfig


class _FakeClient:
    def __init__(self, result=None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls = []
        self.closed = False

    async def _answer(self, name, *args):
        self.calls.append((name, args))
        if self.error is not None:
            raise self.error
        return self.result

    async def validate_email(self, body):
        return await self._answer("validate_email", body)

    async def sign_up(self, validation_id, body):
        return await self._answer("sign_up", validation_id, body)

    async def sign_in(self, body):
        return await self._answer("sign_in", body)

    async def aclose(self) -> None:
        self.closed = True


def _install(monkeypatch, client: _FakeClient) -> dict:
    captured = {}

    def _make_client(cfg, *, base_url_override):
        captured["base_url_override"] = base_url_override
        return client

    monkeypatch.setattr(auth_cmd, "load_config", lambda: AppConfig())
    monkeypatch.setattr(auth_cmd, "make_client", _make_client)
    return captured


def _tokens() -> AuthorizationResponse:
    return AuthorizationResponse(user_id="u-1", access_token="access", refresh_token="refresh")


def test_login_prints_user_id(monkeypatch) -> None:
    client = _FakeClient(result=_tokens())
    captured = _install(monkeypatch, client)

    result = CliRunner().invoke(
        main.app,
        ["auth", "login", "--email", "a@b.c", "--password", "pw", "--base-url", "api.test"],
    )

    assert result.exit_code == 0, result.output
    assert "user_id=u-1" in result.output
    assert "access" not in result.output.replace("Login successful", "")
    assert client.closed is True
    assert captured["base_url_override"] == "api.test"
    name, args = client.calls[0]
    assert name == "sign_in"
    assert args[0].email == "a@b.c"


def test_login_json_includes_tokens(monkeypatch) -> None:
    _install(monkeypatch, _FakeClient(result=_tokens()))

    result = CliRunner().invoke(main.app, ["auth", "login", "--email", "a@b.c", "--password", "pw", "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"userID": "u-1", "accessToken": "access", "refreshToken": "refresh"}


def test_validate_prints_validation_id(monkeypatch) -> None:
    _install(monkeypatch, _FakeClient(result=ValidationResponse(validation_id="v-42")))

    result = CliRunner().invoke(main.app, ["auth", "validate", "--email", "a@b.c", "--password", "pw"])

    assert result.exit_code == 0, result.output
    assert "validation_id=v-42" in result.output


def test_signup_passes_validation_id(monkeypatch) -> None:
    client = _FakeClient(result=_tokens())
    _install(monkeypatch, client)

    result = CliRunner().invoke(
        main.app,
        [
            "auth", "signup",
            "--validation-id", "abc-123",
            "--email", "a@b.c",
            "--password", "pw",
            "--code", "0000",
        ],
    )

    assert result.exit_code == 0, result.output
    name, args = client.calls[0]
    assert name == "sign_up"
    assert args[0] == "abc-123"
    assert args[1].code == "0000"


def test_login_unauthorized_exits_2(monkeypatch) -> None:
    client = _FakeClient(error=AuthError(401, "POST /auth/login failed with 401"))
    _install(monkeypatch, client)

    result = CliRunner().invoke(main.app, ["auth", "login", "--email", "a@b.c", "--password", "bad"])

    assert result.exit_code == 2
    assert "unauthorized (401)" in result.output
    assert client.closed is True


def test_login_server_error_shows_status(monkeypatch) -> None:
    _install(monkeypatch, _FakeClient(error=InvalidResponseError(500, "boom", "server exploded")))

    result = CliRunner().invoke(main.app, ["auth", "login", "--email", "a@b.c", "--password", "pw"])

    assert result.exit_code == 2
    assert "HTTP 500" in result.output
    assert "server exploded" in result.output


def test_network_and_decoding_errors_exit_2(monkeypatch) -> None:
    for error, needle in [
        (NetworkError("connect timeout"), "unreachable"),
        (DecodingError(ValueError("missing accessToken")), "unexpected response"),
    ]:
        _install(monkeypatch, _FakeClient(error=error))
        result = CliRunner().invoke(main.app, ["auth", "login", "--email", "a@b.c", "--password", "pw"])
        assert result.exit_code == 2
        assert needle in result.output

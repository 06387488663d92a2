from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, NoReturn

import typer
from eventify_client import (
    AuthError,
    DecodingError,
    EventifyClientError,
    InvalidResponseError,
    NetworkError,
    SignInRequest,
    SignUpRequest,
    ValidateRequest,
)

from .. import console
from ..config import load_config
from ..http import make_client

app = typer.Typer(help="Auth commands.")


def _run(base_url: str | None, call: Callable[[Any], Awaitable[Any]]) -> Any:
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)

    async def _go():
        try:
            return await call(client)
        finally:
            await client.aclose()

    return asyncio.run(_go())


def _fail(action: str, exc: EventifyClientError) -> NoReturn:
    if isinstance(exc, AuthError):
        console.err(f"{action} failed: unauthorized ({exc.status_code}).")
    elif isinstance(exc, InvalidResponseError):
        console.err(f"{action} failed with HTTP {exc.status_code}.")
        if exc.details:
            console.info(exc.details)
    elif isinstance(exc, NetworkError):
        console.err(f"{action} failed: API is unreachable ({exc}).")
    elif isinstance(exc, DecodingError):
        console.err(f"{action} failed: unexpected response ({exc.cause}).")
    else:
        console.err(f"{action} failed: {exc}")
    raise typer.Exit(code=2)


@app.command("validate")
def validate(
    email: str = typer.Option(..., "--email", prompt=True, help="Email to register."),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True, help="Account password."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
    json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    body = ValidateRequest(email=email, password=password)
    try:
        result = _run(base_url, lambda c: c.validate_email(body))
    except EventifyClientError as e:
        _fail("Email validation", e)

    if json_out:
        console.print_model(result)
        return
    console.ok(f"Validation code sent to {email}.")
    console.info(f"validation_id={result.validation_id}")


@app.command("signup")
def signup(
    validation_id: str = typer.Option(..., "--validation-id", prompt=True, help="Id returned by 'auth validate'."),
    email: str = typer.Option(..., "--email", prompt=True, help="Email to register."),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True, help="Account password."),
    code: str = typer.Option(..., "--code", prompt=True, help="Code received by email."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
    json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    body = SignUpRequest(email=email, password=password, code=code)
    try:
        result = _run(base_url, lambda c: c.sign_up(validation_id, body))
    except EventifyClientError as e:
        _fail("Sign-up", e)

    if json_out:
        console.print_model(result)
        return
    console.ok(f"Account created. user_id={result.user_id}")


@app.command("login")
def login(
    email: str = typer.Option(..., "--email", prompt=True, help="Account email."),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True, help="Account password."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
    json_out: bool = typer.Option(False, "--json", help="Print raw JSON including tokens."),
):
    body = SignInRequest(email=email, password=password)
    try:
        result = _run(base_url, lambda c: c.sign_in(body))
    except EventifyClientError as e:
        _fail("Login", e)

    if json_out:
        console.print_model(result)
        return
    console.ok(f"Login successful. user_id={result.user_id}")

from __future__ import annotations

import os

import typer

from .. import console
from ..config import config_path, default_config, load_config, normalize_base_url, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/eventify/config.toml).")


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        base_url: str = typer.Option(
            default_config().base_url,
            "--base-url",
            prompt="API base URL",
            help="API base URL like https://eventify.website/api/v1/",
        ),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.base_url = normalize_base_url(base_url, warn=True)
    if not cfg.base_url:
        console.err("Base URL cannot be empty.")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    console.console.print(
        f"base_url={cfg.base_url} timeout_s={cfg.timeout_s} logging_enabled={str(cfg.logging_enabled).lower()}"
    )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help="Setting key (base_url, timeout_s, logging_enabled)."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k == "base_url":
        console.console.print(cfg.base_url)
        return
    if k == "timeout_s":
        console.console.print(str(cfg.timeout_s))
        return
    if k == "logging_enabled":
        console.console.print(str(cfg.logging_enabled).lower())
        return
    console.err(f"Unknown setting: {key}")
    raise typer.Exit(code=2)


@app.command("set")
def set_setting(
        base_url: str | None = typer.Option(None, "--base-url", help="Set API base URL."),
        timeout_s: float | None = typer.Option(None, "--timeout", min=0.1, help="Request timeout in seconds."),
        logging_mode: str | None = typer.Option(
            None,
            "--logging",
            help="Request/response diagnostics: on or off.",
        ),
):
    cfg = load_config(with_env=False)
    if base_url is not None:
        cfg.base_url = normalize_base_url(base_url, warn=True)
        if not cfg.base_url:
            console.err("Base URL cannot be empty.")
            raise typer.Exit(code=2)
    if timeout_s is not None:
        cfg.timeout_s = timeout_s
    if logging_mode is not None:
        mode = logging_mode.strip().lower()
        if mode not in {"on", "off"}:
            console.err("--logging expects 'on' or 'off'.")
            raise typer.Exit(code=2)
        cfg.logging_enabled = mode == "on"
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")

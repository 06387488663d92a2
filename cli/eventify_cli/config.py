from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from eventify_client.config_types import DEFAULT_BASE_URL

from . import console

APP_NAME = "eventify"
CONFIG_FILENAME = "config.toml"
ENV_BASE_URL = "EVENTIFY_BASE_URL"
DEFAULT_TIMEOUT_S = 15.0

_WARNED_BASE_URL_SCHEME = False


@dataclass
class AppConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = DEFAULT_TIMEOUT_S
    logging_enabled: bool = True


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(
        base_url=DEFAULT_BASE_URL,
        timeout_s=DEFAULT_TIMEOUT_S,
        logging_enabled=True,
    )


def normalize_base_url(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/") + "/"
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_BASE_URL_SCHEME
    if _WARNED_BASE_URL_SCHEME:
        return
    if not _is_interactive():
        return
    console.warn(f"base_url missing scheme, assuming {normalized}")
    _WARNED_BASE_URL_SCHEME = True


def _is_interactive() -> bool:
    import sys
    return bool(sys.stderr.isatty() or sys.stdout.isatty())


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "base_url": cfg.base_url,
        "timeout_s": float(cfg.timeout_s),
        "logging_enabled": bool(cfg.logging_enabled),
    }


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    base_url = normalize_base_url(str(data.get("base_url") or ""), warn=True)
    if base_url:
        cfg.base_url = base_url
    timeout_raw = data.get("timeout_s")
    if timeout_raw is not None and not isinstance(timeout_raw, bool):
        try:
            timeout_s = float(timeout_raw)
        except (TypeError, ValueError):
            timeout_s = 0.0
        if timeout_s > 0:
            cfg.timeout_s = timeout_s
    logging_enabled = data.get("logging_enabled")
    if isinstance(logging_enabled, bool):
        cfg.logging_enabled = logging_enabled
    return cfg


def load_config(*, with_env: bool = True) -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        cfg = from_toml(data)
    except FileNotFoundError:
        cfg = default_config()
    return apply_env(cfg) if with_env else cfg


def apply_env(cfg: AppConfig) -> AppConfig:
    env_value = normalize_base_url(os.getenv(ENV_BASE_URL, ""))
    if env_value:
        cfg.base_url = env_value
    return cfg


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path

from __future__ import annotations

from importlib import metadata

from eventify_client import EventifyClient
from eventify_client.config_types import ClientConfig

from .config import AppConfig, normalize_base_url


def cli_version() -> str:
    try:
        return metadata.version("eventify-client")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def make_client(cfg: AppConfig, *, base_url_override: str | None) -> EventifyClient:
    base_url = normalize_base_url(base_url_override or cfg.base_url, warn=True)
    return EventifyClient(
        ClientConfig(
            base_url=base_url,
            timeout_s=cfg.timeout_s,
            logging_enabled=cfg.logging_enabled,
            client_version=cli_version(),
        )
    )

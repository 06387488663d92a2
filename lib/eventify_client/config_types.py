from __future__ import annotations
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://eventify.website/api/v1/"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = 15.0
    logging_enabled: bool = True
    client_version: str | None = None

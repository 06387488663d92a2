from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


@dataclass(frozen=True)
class NetworkRequest:
    url: str
    method: HTTPMethod
    headers: dict[str, str] | None = None
    body: bytes | None = None

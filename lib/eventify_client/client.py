from __future__ import annotations

from typing import TypeVar

import httpx

from .config_types import ClientConfig
from .endpoints import Endpoint, SignIn, SignUp, ValidateEmail
from .errors import BadURLError
from .http_types import NetworkRequest
from .models import AuthorizationResponse, SignInRequest, SignUpRequest, ValidateRequest, ValidationResponse
from .transport import NetworkClient, Transport

T = TypeVar("T")


def resolve_url(base_url: str, path: str) -> str:
    base = (base_url or "").strip()
    if not base:
        raise BadURLError("Base URL is empty")
    if not (path or "").strip():
        raise BadURLError("Endpoint path is empty")
    # Without the trailing slash the last segment of the base would be replaced.
    if not base.endswith("/"):
        base += "/"
    try:
        url = httpx.URL(base).join(path)
    except httpx.InvalidURL as e:
        raise BadURLError(f"Cannot resolve {path!r} against {base_url!r}: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise BadURLError(f"Cannot resolve {path!r} against {base_url!r}")
    return str(url)


def build_request(endpoint: Endpoint, base_url: str) -> NetworkRequest:
    return NetworkRequest(
        url=resolve_url(base_url, endpoint.path),
        method=endpoint.method,
        headers=endpoint.headers,
        body=endpoint.body,
    )


class EventifyClient:
    def __init__(self, cfg: ClientConfig | None = None, *, network_client: NetworkClient | None = None):
        self._cfg = cfg or ClientConfig()
        self._owns_transport = network_client is None
        self._t: NetworkClient = network_client or Transport(self._cfg)

    @property
    def base_url(self) -> str:
        return self._cfg.base_url

    async def aclose(self) -> None:
        if self._owns_transport:
            await self._t.aclose()

    async def __aenter__(self) -> EventifyClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _request(self, endpoint: Endpoint, response_type: type[T]) -> T:
        request = build_request(endpoint, self._cfg.base_url)
        return await self._t.send(request, response_type)

    # --- auth API ---
    async def validate_email(self, body: ValidateRequest) -> ValidationResponse:
        return await self._request(ValidateEmail(body), ValidationResponse)

    async def sign_up(self, validation_id: str, body: SignUpRequest) -> AuthorizationResponse:
        return await self._request(SignUp(validation_id, body), AuthorizationResponse)

    async def sign_in(self, body: SignInRequest) -> AuthorizationResponse:
        return await self._request(SignIn(body), AuthorizationResponse)

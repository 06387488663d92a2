from __future__ import annotations

import logging
import time
from typing import Protocol, TypeVar

import httpx

from . import diagnostics
from .codec import DecodeFailure, decode
from .config_types import ClientConfig
from .errors import AuthError, DecodingError, InvalidResponseError, NetworkError
from .http_types import NetworkRequest

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NetworkClient(Protocol):
    async def send(self, request: NetworkRequest, response_type: type[T]) -> T: ...


class Transport:
    def __init__(self, cfg: ClientConfig, *, http_transport: httpx.AsyncBaseTransport | None = None):
        self._cfg = cfg
        headers = {"User-Agent": f"eventify-client/{cfg.client_version or '0.1.0'}"}
        self._client = httpx.AsyncClient(
            timeout=cfg.timeout_s,
            headers=headers,
            follow_redirects=True,
            transport=http_transport,
        )

    @property
    def logging_enabled(self) -> bool:
        return self._cfg.logging_enabled

    async def aclose(self) -> None:
        await self._client.aclose()

    def _log(self, *lines: str, level: int = logging.INFO) -> None:
        if not self._cfg.logging_enabled:
            return
        for line in lines:
            logger.log(level, "📡 NetworkClient: %s", line)

    async def send(self, request: NetworkRequest, response_type: type[T]) -> T:
        self._log(*diagnostics.describe_request(request))

        try:
            self._log(f"⬆️ Sending request: {request.url}")
            started = time.perf_counter()
            r = await self._client.request(
                request.method.value,
                request.url,
                headers=request.headers,
                content=request.body,
            )
            elapsed = time.perf_counter() - started
        except httpx.ProtocolError as e:
            self._log("❌ Error: malformed HTTP response", level=logging.WARNING)
            raise NetworkError("Invalid response", e) from e
        except httpx.RequestError as e:
            self._log(f"❌ Transport error: {type(e).__name__}: {e}", level=logging.WARNING)
            raise NetworkError(str(e) or type(e).__name__, e) from e

        body = r.content
        self._log(*diagnostics.describe_response(r.status_code, r.headers, body, elapsed))

        if not 200 <= r.status_code <= 299:
            self._log(f"❌ HTTP status error: {r.status_code}", level=logging.WARNING)
            msg = f"{request.method.value} {request.url} failed with {r.status_code}"
            details = r.text[:1000] if body else None
            if r.status_code in (401, 403):
                raise AuthError(r.status_code, msg, details)
            raise InvalidResponseError(r.status_code, msg, details)

        self._log(f"🔄 Decoding response as {getattr(response_type, '__name__', response_type)}")
        try:
            value = decode(response_type, body)
        except DecodeFailure as e:
            self._log(f"❌ Decoding error: {e}", level=logging.WARNING)
            self._log(*diagnostics.describe_decoding_failure(e, body), level=logging.WARNING)
            raise DecodingError(e) from e
        self._log("✅ Decoding finished")
        return value

"""Human-readable records describing requests, responses and decoding failures.

Every helper returns a list of lines; the transport decides whether and where
to emit them.
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from http import HTTPStatus
from typing import Any

from .codec import DecodeFailure, KeyNotFound, TypeMismatch, ValueNotFound, json_type_name
from .http_types import NetworkRequest

MAX_BODY_CHARS = 1000
MAX_DEPTH = 3
MAX_ARRAY_ITEMS = 3
MAX_SCALAR_CHARS = 100


def _pretty_json(data: bytes) -> str | None:
    try:
        parsed = json.loads(data)
    except (ValueError, UnicodeDecodeError):
        return None
    if not isinstance(parsed, (dict, list)):
        return None
    return json.dumps(parsed, indent=2, ensure_ascii=False)


def _truncate(text: str, *, total_notice: bool) -> str:
    if len(text) <= MAX_BODY_CHARS:
        return text
    if total_notice:
        return f"{text[:MAX_BODY_CHARS]}... [truncated, total {len(text)} chars]"
    return f"{text[:MAX_BODY_CHARS]}... [truncated]"


def describe_request(request: NetworkRequest) -> list[str]:
    lines = [f"📤 REQUEST ➡️ {request.method.value} {request.url}"]
    if request.headers:
        lines.append("📋 Headers:")
        lines.extend(f"   {k}: {v}" for k, v in request.headers.items())
    if request.body is not None:
        lines.append(f"📦 Request body ({len(request.body)} bytes):")
        try:
            lines.append(f"   {request.body.decode('utf-8')}")
        except UnicodeDecodeError:
            lines.append("   [binary data]")
        pretty = _pretty_json(request.body)
        if pretty is not None:
            lines.append("📝 Pretty JSON:")
            lines.append(f"   {pretty}")
    return lines


def describe_response(
        status_code: int,
        headers: Mapping[str, str],
        body: bytes,
        elapsed_s: float,
) -> list[str]:
    try:
        reason = HTTPStatus(status_code).phrase
    except ValueError:
        reason = "Unknown Status"
    lines = [
        f"⬇️ Response received in {elapsed_s:.3f}s",
        f"📥 RESPONSE ⬅️ {status_code} {reason}",
        "📋 Response headers:",
    ]
    lines.extend(f"   {k}: {v}" for k, v in headers.items())
    lines.append(f"📦 Response body ({len(body)} bytes):")
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError:
        lines.append("   [binary data]")
        return lines
    lines.append(f"   {_truncate(text, total_notice=True)}")
    pretty = _pretty_json(body)
    if pretty is not None:
        lines.append("📝 Pretty JSON:")
        lines.append(f"   {_truncate(pretty, total_notice=False)}")
    return lines


def describe_decoding_failure(failure: DecodeFailure, body: bytes) -> list[str]:
    lines = ["🔍 Decoding error details:"]
    path = failure.path_string
    if isinstance(failure, TypeMismatch):
        lines.append(f"   Type mismatch: expected {failure.expected}, path: {path}")
    elif isinstance(failure, ValueNotFound):
        lines.append(f"   Value not found: for type {failure.expected}, path: {path}")
    elif isinstance(failure, KeyNotFound):
        lines.append(f"   Key not found: {failure.key}, path: {path}")
    else:
        lines.append(f"   Corrupted data: path: {path}")
    lines.append(f"   Description: {failure.description}")
    if failure.underlying is not None:
        lines.append(f"   Underlying error: {failure.underlying}")

    try:
        parsed = json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        lines.append(f"   Unable to parse JSON for debugging: {e}")
        return lines
    if isinstance(parsed, (dict, list)):
        lines.append("📊 Received JSON structure:")
        lines.extend(json_structure(parsed, indent=3))
    return lines


def _scalar(value: Any) -> str:
    text = value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)
    return text[:MAX_SCALAR_CHARS]


def json_structure(
        value: Any,
        indent: int = 0,
        max_depth: int = MAX_DEPTH,
        depth: int = 0,
) -> list[str]:
    pad = " " * indent
    if depth > max_depth:
        return [f"{pad}... [max depth]"]

    lines: list[str] = []
    if isinstance(value, dict):
        for key, item in value.items():
            kind = json_type_name(item)
            if isinstance(item, (dict, list)):
                lines.append(f"{pad}{key} [{kind}]:")
                lines.extend(json_structure(item, indent + 3, max_depth, depth + 1))
            else:
                lines.append(f"{pad}{key} [{kind}]: {_scalar(item)}")
    elif isinstance(value, list):
        lines.append(f"{pad}array [{len(value)} items]:")
        shown = value[:MAX_ARRAY_ITEMS]
        for i, item in enumerate(shown):
            lines.append(f"{pad}[{i}]:")
            lines.extend(json_structure(item, indent + 3, max_depth, depth + 1))
        if len(value) > len(shown):
            lines.append(f"{pad}... +{len(value) - len(shown)} more")
    else:
        lines.append(f"{pad}{_scalar(value)}")
    return lines

from __future__ import annotations

import json

from eventify_client.codec import DataCorrupted, KeyNotFound, TypeMismatch, ValueNotFound
from eventify_client.diagnostics import (
    describe_decoding_failure,
    describe_request,
    describe_response,
    json_structure,
)
from eventify_client.http_types import HTTPMethod, NetworkRequest


def test_describe_request_pretty_prints_json_body() -> None:
    req = NetworkRequest(
        url="https://eventify.test/auth/login",
        method=HTTPMethod.POST,
        headers={"Content-Type": "application/json"},
        body=b'{"email":"a@b.c"}',
    )
    lines = describe_request(req)
    assert lines[0] == "📤 REQUEST ➡️ POST https://eventify.test/auth/login"
    assert "   Content-Type: application/json" in lines
    assert "📦 Request body (17 bytes):" in lines
    assert "📝 Pretty JSON:" in lines


def test_describe_request_without_body() -> None:
    req = NetworkRequest(url="https://eventify.test/x", method=HTTPMethod.GET)
    assert describe_request(req) == ["📤 REQUEST ➡️ GET https://eventify.test/x"]


def test_describe_request_binary_body() -> None:
    req = NetworkRequest(url="https://eventify.test/x", method=HTTPMethod.PUT, body=b"\xff\xfe")
    assert "   [binary data]" in describe_request(req)


def test_describe_response_truncates_long_body() -> None:
    body = ("y" * 1500).encode()
    lines = describe_response(200, {"content-type": "text/plain"}, body, 0.1234)
    assert lines[0] == "⬇️ Response received in 0.123s"
    assert lines[1] == "📥 RESPONSE ⬅️ 200 OK"
    body_line = next(line for line in lines if line.startswith("   yyy"))
    assert body_line.endswith("... [truncated, total 1500 chars]")
    assert len(body_line) == 3 + 1000 + len("... [truncated, total 1500 chars]")
    assert "📝 Pretty JSON:" not in lines


def test_describe_response_unknown_status() -> None:
    lines = describe_response(599, {}, b"", 0.0)
    assert lines[1] == "📥 RESPONSE ⬅️ 599 Unknown Status"


def test_json_structure_limits_array_items() -> None:
    lines = json_structure({"items": list(range(10))})
    assert lines[0] == "items [array]:"
    assert lines[1] == "   array [10 items]:"
    assert "   ... +7 more" in lines
    assert sum(1 for line in lines if line.strip().startswith("[")) == 3


def test_json_structure_limits_depth() -> None:
    nested = {"a": {"b": {"c": {"d": {"e": 1}}}}}
    lines = json_structure(nested)
    assert lines[-1].strip() == "... [max depth]"
    assert not any("e [number]" in line for line in lines)


def test_json_structure_clips_scalars() -> None:
    lines = json_structure({"long": "z" * 500, "flag": True, "none": None})
    assert lines[0] == "long [string]: " + "z" * 100
    assert lines[1] == "flag [boolean]: true"
    assert lines[2] == "none [null]: null"


def test_describe_decoding_failure_kinds() -> None:
    body = json.dumps({"userID": 1}).encode()
    assert "   Key not found: accessToken, path: " in describe_decoding_failure(
        KeyNotFound("accessToken", (), "missing"), body
    )
    assert "   Type mismatch: expected str, path: userID" in describe_decoding_failure(
        TypeMismatch("str", ("userID",), "wrong"), body
    )
    assert "   Value not found: for type str, path: userID" in describe_decoding_failure(
        ValueNotFound("str", ("userID",), "null"), body
    )


def test_describe_decoding_failure_on_invalid_json() -> None:
    lines = describe_decoding_failure(DataCorrupted((), "not json", ValueError("x")), b"<html>")
    assert "   Corrupted data: path: " in lines
    assert "   Underlying error: x" in lines
    assert any(line.startswith("   Unable to parse JSON for debugging") for line in lines)
    assert "📊 Received JSON structure:" not in lines

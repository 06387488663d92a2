"""JSON encoding of request payloads and typed decoding of response bodies.

Decoding walks the target type (a dataclass, a JSON scalar type or a
``list``/``dict``/optional of those) alongside the parsed JSON value and fails
with a :class:`DecodeFailure` that records where in the document it stopped.
Required fields never fall back to a default.
"""
from __future__ import annotations

import dataclasses
import json
import types
import typing
from typing import Any, TypeVar

from .errors import RequestEncodingError

T = TypeVar("T")

_NONE_TYPE = type(None)


class DecodeFailure(Exception):
    kind = "decoding error"

    def __init__(
            self,
            path: tuple[str, ...],
            description: str,
            underlying: BaseException | None = None,
    ):
        super().__init__(description)
        self.path = path
        self.description = description
        self.underlying = underlying

    @property
    def path_string(self) -> str:
        return ".".join(self.path)

    def __str__(self) -> str:
        where = self.path_string or "<root>"
        return f"{self.kind} at {where}: {self.description}"


class TypeMismatch(DecodeFailure):
    kind = "type mismatch"

    def __init__(self, expected: str, path: tuple[str, ...], description: str):
        super().__init__(path, description)
        self.expected = expected


class ValueNotFound(DecodeFailure):
    kind = "value not found"

    def __init__(self, expected: str, path: tuple[str, ...], description: str):
        super().__init__(path, description)
        self.expected = expected


class KeyNotFound(DecodeFailure):
    kind = "key not found"

    def __init__(self, key: str, path: tuple[str, ...], description: str):
        super().__init__(path, description)
        self.key = key


class DataCorrupted(DecodeFailure):
    kind = "corrupted data"


def json_key(f: dataclasses.Field) -> str:
    return f.metadata.get("json_key", f.name)


def to_json_value(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {json_key(f): to_json_value(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {str(k): to_json_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_value(v) for v in value]
    return value


def encode(payload: Any) -> bytes:
    try:
        text = json.dumps(
            to_json_value(payload),
            ensure_ascii=False,
            separators=(",", ":"),
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise RequestEncodingError(f"Failed to encode {type(payload).__name__}: {e}", e) from e
    return text.encode("utf-8")


def decode(target: type[T], data: bytes | str) -> T:
    try:
        raw = json.loads(data)
    except (ValueError, UnicodeDecodeError) as e:
        raise DataCorrupted((), "The given data was not valid JSON.", e) from e
    return decode_value(target, raw, ())


def type_name(tp: Any) -> str:
    if tp is Any:
        return "Any"
    if typing.get_origin(tp) is not None:
        return str(tp).replace("typing.", "")
    return getattr(tp, "__name__", str(tp))


def json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _mismatch(tp: Any, value: Any, path: tuple[str, ...]) -> TypeMismatch:
    expected = type_name(tp)
    return TypeMismatch(
        expected,
        path,
        f"Expected to decode {expected} but found {json_type_name(value)} instead.",
    )


def decode_value(tp: Any, value: Any, path: tuple[str, ...]) -> Any:
    if tp is Any:
        return value

    origin = typing.get_origin(tp)
    if origin is typing.Union or origin is types.UnionType:
        args = [a for a in typing.get_args(tp) if a is not _NONE_TYPE]
        if value is None and len(args) < len(typing.get_args(tp)):
            return None
        if len(args) != 1:
            raise TypeError(f"Unsupported union type: {tp}")
        return decode_value(args[0], value, path)

    if value is None:
        expected = type_name(tp)
        raise ValueNotFound(expected, path, f"Expected {expected} value but found null instead.")

    if dataclasses.is_dataclass(tp):
        return _decode_dataclass(tp, value, path)

    if tp is list or origin is list:
        if not isinstance(value, list):
            raise _mismatch(tp, value, path)
        (item_tp,) = typing.get_args(tp) or (Any,)
        return [decode_value(item_tp, item, path + (f"Index {i}",)) for i, item in enumerate(value)]

    if tp is dict or origin is dict:
        if not isinstance(value, dict):
            raise _mismatch(tp, value, path)
        args = typing.get_args(tp)
        item_tp = args[1] if args else Any
        return {k: decode_value(item_tp, v, path + (k,)) for k, v in value.items()}

    if tp is bool:
        if not isinstance(value, bool):
            raise _mismatch(tp, value, path)
        return value
    if tp is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise _mismatch(tp, value, path)
        return value
    if tp is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise _mismatch(tp, value, path)
        return float(value)
    if tp is str:
        if not isinstance(value, str):
            raise _mismatch(tp, value, path)
        return value

    raise TypeError(f"Unsupported target type: {tp!r}")


def _decode_dataclass(cls: Any, value: Any, path: tuple[str, ...]) -> Any:
    if not isinstance(value, dict):
        raise _mismatch(dict, value, path)
    hints = typing.get_type_hints(cls)
    kwargs: dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        key = json_key(f)
        if key not in value:
            if f.default is not dataclasses.MISSING or f.default_factory is not dataclasses.MISSING:
                continue
            raise KeyNotFound(key, path, f'No value associated with key "{key}".')
        kwargs[f.name] = decode_value(hints[f.name], value[key], path + (key,))
    return cls(**kwargs)

from __future__ import annotations

import enum
import json
import types
from collections.abc import Collection, Mapping
from dataclasses import MISSING, Field, fields, is_dataclass
from functools import lru_cache
from typing import Any, Literal, TypeVar, Union, get_args, get_origin, get_type_hints

T = TypeVar("T")

_NONE_TYPE = type(None)


class CodecError(Exception):
    pass


def json_name(f: Field[Any]) -> str:
    """JSON key of a record field (`from` and friends are renamed via metadata)."""
    return str(f.metadata.get("json", f.name))


@lru_cache(maxsize=None)
def _record_hints(cls: type) -> dict[str, Any]:
    return get_type_hints(cls)


# ========================== Encoding ==========================


def encode_record(obj: Any, *, exclude: Collection[str] = ()) -> dict[str, Any]:
    """
    Encode a dataclass record into a JSON-ready dict.

    - `None` fields are omitted (absent-by-omission on the wire)
    - a `JSON_TYPE` class attribute is emitted first as the `type` discriminator
    """
    out: dict[str, Any] = {}
    tag = getattr(type(obj), "JSON_TYPE", None)
    if isinstance(tag, str):
        out["type"] = tag
    for f in fields(obj):
        if f.name in exclude:
            continue
        value = getattr(obj, f.name)
        if value is None:
            continue
        out[json_name(f)] = to_json_value(value)
    return out


def to_json_value(obj: Any) -> Any:
    if isinstance(obj, enum.Enum):
        return obj.value
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj
    hook = getattr(obj, "to_json", None)
    if callable(hook) and not isinstance(obj, type):
        return hook()
    if is_dataclass(obj) and not isinstance(obj, type):
        return encode_record(obj)
    if isinstance(obj, (set, frozenset)):
        return sorted((to_json_value(v) for v in obj), key=str)
    if isinstance(obj, (list, tuple)):
        return [to_json_value(v) for v in obj]
    if isinstance(obj, Mapping):
        return {str(k): to_json_value(v) for k, v in obj.items()}
    raise CodecError(f"Cannot encode value of type {type(obj).__name__}")


def dumps(obj: Any) -> str:
    """Compact JSON (no whitespace), the way the Bot API examples show it."""
    try:
        return json.dumps(
            to_json_value(obj),
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise CodecError(f"Failed to serialize {type(obj).__name__}: {e}") from e


# ========================== Decoding ==========================


def _decode_primitive(tp: type, value: Any) -> Any:
    if tp is bool:
        if isinstance(value, bool):
            return value
    elif tp is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif tp is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif tp is str:
        if isinstance(value, str):
            return value
    else:
        raise CodecError(f"Unsupported annotation: {tp!r}")
    raise CodecError(f"Expected {tp.__name__}, got {type(value).__name__}")


def _decode_union(tp: Any, value: Any) -> Any:
    args = get_args(tp)
    if value is None:
        if _NONE_TYPE in args:
            return None
        raise CodecError(f"Unexpected null for {tp!r}")
    candidates = [a for a in args if a is not _NONE_TYPE]
    if len(candidates) == 1:
        return from_json_value(candidates[0], value)
    errors: list[str] = []
    for candidate in candidates:
        try:
            return from_json_value(candidate, value)
        except CodecError as e:
            errors.append(str(e))
    raise CodecError(f"No variant of {tp!r} matched: {'; '.join(errors)}")


def decode_record(cls: type[T], value: Any, /, **decoded: Any) -> T:
    """
    Build a dataclass record from a JSON object.

    Keyword arguments are already-decoded field values (used by two-stage
    decoders which compute some fields themselves).
    """
    if not isinstance(value, dict):
        raise CodecError(f"{cls.__name__}: expected object, got {type(value).__name__}")
    hints = _record_hints(cls)
    kwargs: dict[str, Any] = dict(decoded)
    for f in fields(cls):  # type: ignore[arg-type]
        if not f.init or f.name in kwargs:
            continue
        key = json_name(f)
        raw = value.get(key)
        if raw is not None:
            try:
                kwargs[f.name] = from_json_value(hints[f.name], raw)
            except CodecError as e:
                raise CodecError(f"{cls.__name__}.{key}: {e}") from e
            continue
        if f.default is MISSING and f.default_factory is MISSING:
            raise CodecError(f"{cls.__name__}: missing field {key!r}")
    return cls(**kwargs)


def decode_tagged(
    variants: Mapping[str, type[T]],
    value: Any,
    *,
    owner: str,
    tag: str = "type",
) -> T:
    if not isinstance(value, dict):
        raise CodecError(f"{owner}: expected object, got {type(value).__name__}")
    kind = value.get(tag)
    cls = variants.get(kind) if isinstance(kind, str) else None
    if cls is None:
        raise CodecError(f"{owner}: unknown {tag} {kind!r}")
    return decode_record(cls, value)


def from_json_value(tp: Any, value: Any) -> Any:
    if tp is Any:
        return value
    origin = get_origin(tp)
    if origin is Union or origin is types.UnionType:
        return _decode_union(tp, value)
    if origin is Literal:
        if value not in get_args(tp):
            raise CodecError(f"Unexpected value {value!r}, expected one of {get_args(tp)!r}")
        return value
    if origin in (list, set, frozenset):
        if not isinstance(value, list):
            raise CodecError(f"Expected array, got {type(value).__name__}")
        args = get_args(tp)
        item_tp = args[0] if args else Any
        items = [from_json_value(item_tp, v) for v in value]
        return items if origin is list else origin(items)
    if origin is dict:
        if not isinstance(value, dict):
            raise CodecError(f"Expected object, got {type(value).__name__}")
        args = get_args(tp)
        value_tp = args[1] if len(args) == 2 else Any
        return {str(k): from_json_value(value_tp, v) for k, v in value.items()}
    if isinstance(tp, type):
        if issubclass(tp, enum.Enum):
            try:
                return tp(value)
            except ValueError as e:
                raise CodecError(f"Unknown {tp.__name__} value: {value!r}") from e
        hook = getattr(tp, "from_json", None)
        if callable(hook):
            return hook(value)
        if is_dataclass(tp):
            return decode_record(tp, value)
        return _decode_primitive(tp, value)
    raise CodecError(f"Unsupported annotation: {tp!r}")


def loads(tp: type[T] | Any, raw: str | bytes) -> Any:
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise CodecError(f"Invalid JSON: {e}") from e
    return from_json_value(tp, data)

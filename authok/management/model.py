"""Dataclass models and their JSON codec.

Every field of a model defaults to ``None`` which means "absent": it is left
out of the encoded payload, so a partial update only carries the fields the
caller set. ``NULL`` is the explicit JSON ``null`` for the few fields where
"cleared" differs from "absent".

Fields are plain dataclass fields; ``attr()`` adds the wire key when it
differs from the attribute name and an optional per-field codec.
"""
from __future__ import annotations

import json
import typing
from dataclasses import dataclass, field, fields
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from .exceptions import DecodeError

M = TypeVar("M", bound="Model")


class _Null:
    """Singleton standing for an explicit JSON ``null``."""

    _instance: Optional["_Null"] = None

    def __new__(cls) -> "_Null":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NULL"

    def __bool__(self) -> bool:
        return False


NULL = _Null()


def _type_error(key: Optional[str], raw: Any) -> DecodeError:
    where = f"field {key}" if key else "response"
    return DecodeError(f"unexpected type for {where}: {type(raw).__name__}")


# ─────────────────────────────────────────────────────────────────────────────
# Field codecs
# ─────────────────────────────────────────────────────────────────────────────
class FieldCodec:
    """Custom wire mapping for a single field."""

    def encode(self, value: Any) -> Any:
        return encode_value(value)

    def decode(self, raw: Any, key: str) -> Any:
        return raw


class TriStateList(FieldCodec):
    """List field distinguishing omitted, explicit empty and explicit null.

    ``None`` is omitted by the model, ``NULL`` encodes to ``null`` and a list
    (possibly empty) encodes as itself. An empty string is accepted on decode
    as an explicit empty list.
    """

    def encode(self, value: Any) -> Any:
        if value is NULL:
            return None
        return list(value)

    def decode(self, raw: Any, key: str) -> Any:
        if raw is None:
            return NULL
        if raw == "":
            return []
        if not isinstance(raw, list):
            raise _type_error(key, raw)
        return list(raw)


class LenientBool(FieldCodec):
    """Boolean that also accepts the strings "true" and "false"."""

    def decode(self, raw: Any, key: str) -> Any:
        if raw is None or isinstance(raw, bool):
            return raw
        if isinstance(raw, str) and raw.lower() in ("true", "false"):
            return raw.lower() == "true"
        raise _type_error(key, raw)


class LenientString(FieldCodec):
    """String identifier that some endpoints send as a JSON number."""

    def decode(self, raw: Any, key: str) -> Any:
        if raw is None or isinstance(raw, str):
            return raw
        if isinstance(raw, bool):
            raise _type_error(key, raw)
        if isinstance(raw, float) and raw.is_integer():
            return str(int(raw))
        if isinstance(raw, (int, float)):
            return str(raw)
        raise _type_error(key, raw)


class Variant(FieldCodec):
    """Discriminator dependent payload.

    Encode serializes whichever concrete model (or mapping) is held. Decode
    keeps the raw mapping; callers pick the shape with ``decode_variant``.
    """

    def decode(self, raw: Any, key: str) -> Any:
        if raw is None:
            return None
        if not isinstance(raw, dict):
            raise _type_error(key, raw)
        return raw


def attr(key: Optional[str] = None, codec: Optional[FieldCodec] = None, skip: bool = False) -> Any:
    """Declare a model field with an explicit wire key and/or codec.

    Args:
        key: JSON key when it differs from the attribute name
        codec: Custom encode/decode for the field
        skip: Leave the field out of the generic codec (handled by the model)
    """
    metadata: Dict[str, Any] = {}
    if key:
        metadata["key"] = key
    if codec is not None:
        metadata["codec"] = codec
    if skip:
        metadata["skip"] = True
    return field(default=None, metadata=metadata)


# ─────────────────────────────────────────────────────────────────────────────
# Encode / decode
# ─────────────────────────────────────────────────────────────────────────────
def encode_value(value: Any) -> Any:
    """Turn models and containers into JSON-ready Python values."""
    if value is NULL:
        return None
    if isinstance(value, Model):
        return value.to_dict()
    if isinstance(value, (list, tuple, set, frozenset)):
        return [encode_value(item) for item in value]
    if isinstance(value, dict):
        return {k: encode_value(v) for k, v in value.items()}
    if isinstance(value, datetime):
        return value.isoformat().replace("+00:00", "Z")
    if isinstance(value, date):
        return value.isoformat()
    return value


_HINTS: Dict[type, Dict[str, Any]] = {}


def _hints(cls: type) -> Dict[str, Any]:
    hints = _HINTS.get(cls)
    if hints is None:
        hints = typing.get_type_hints(cls)
        _HINTS[cls] = hints
    return hints


def _parse_datetime(raw: Any, key: Optional[str]) -> datetime:
    if not isinstance(raw, str):
        raise _type_error(key, raw)
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError as exc:
        raise DecodeError(f"invalid timestamp for field {key}: {raw!r}") from exc


def decode_value(tp: Any, raw: Any, key: Optional[str] = None) -> Any:
    """Decode a JSON value against a type annotation.

    Raises:
        DecodeError: If the JSON type does not match the annotation
    """
    if raw is None:
        return None
    if tp is Any or tp is object:
        return raw

    origin = typing.get_origin(tp)
    if origin is Union:
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return decode_value(args[0], raw, key)
        return raw

    if origin in (list, List):
        if not isinstance(raw, list):
            raise _type_error(key, raw)
        args = typing.get_args(tp)
        item_type = args[0] if args else Any
        return [decode_value(item_type, item, key) for item in raw]

    if origin in (dict, Dict):
        if not isinstance(raw, dict):
            raise _type_error(key, raw)
        args = typing.get_args(tp)
        value_type = args[1] if len(args) == 2 else Any
        return {k: decode_value(value_type, v, key) for k, v in raw.items()}

    if tp is bool:
        if not isinstance(raw, bool):
            raise _type_error(key, raw)
        return raw
    if tp is int:
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise _type_error(key, raw)
        if isinstance(raw, float) and not raw.is_integer():
            raise _type_error(key, raw)
        return int(raw)
    if tp is float:
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise _type_error(key, raw)
        return float(raw)
    if tp is str:
        if not isinstance(raw, str):
            raise _type_error(key, raw)
        return raw
    if tp is datetime:
        return _parse_datetime(raw, key)

    if isinstance(tp, type) and issubclass(tp, Model):
        if isinstance(raw, list) and issubclass(tp, ListEnvelope):
            return tp.from_items(raw)
        if not isinstance(raw, dict):
            raise _type_error(key, raw)
        return tp.from_dict(raw)

    if tp is dict:
        if not isinstance(raw, dict):
            raise _type_error(key, raw)
        return raw
    if tp is list:
        if not isinstance(raw, list):
            raise _type_error(key, raw)
        return raw
    return raw


def decode_variant(variant_type: Type[M], raw: Any) -> Optional[M]:
    """Decode a variant payload against the caller-chosen concrete shape.

    Usage:
        opts = decode_variant(ConnectionOptionsGoogleOAuth2, connection.options)
    """
    if raw is None:
        return None
    if isinstance(raw, variant_type):
        return raw
    if isinstance(raw, Model):
        raw = raw.to_dict()
    if not isinstance(raw, dict):
        raise _type_error(None, raw)
    return variant_type.from_dict(raw)


@dataclass
class Model:
    """Base class of every request/response entity."""

    def to_dict(self) -> Dict[str, Any]:
        """Encode set fields, in declaration order, to a JSON-ready dict."""
        data: Dict[str, Any] = {}
        for f in fields(self):
            if f.metadata.get("skip"):
                continue
            value = getattr(self, f.name)
            if value is None:
                continue
            key = f.metadata.get("key", f.name)
            codec = f.metadata.get("codec")
            data[key] = codec.encode(value) if codec else encode_value(value)
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_dict(cls: Type[M], data: Dict[str, Any]) -> M:
        """Decode a JSON object; unknown keys are ignored."""
        if not isinstance(data, dict):
            raise _type_error(None, data)
        hints = _hints(cls)
        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            if f.metadata.get("skip"):
                continue
            key = f.metadata.get("key", f.name)
            if key not in data:
                continue
            raw = data[key]
            codec = f.metadata.get("codec")
            if codec is not None:
                kwargs[f.name] = codec.decode(raw, key)
            else:
                kwargs[f.name] = decode_value(hints[f.name], raw, key)
        return cls(**kwargs)

    @classmethod
    def from_json(cls: Type[M], payload: Union[str, bytes]) -> M:
        try:
            data = json.loads(payload)
        except ValueError as exc:
            raise DecodeError(f"invalid JSON payload: {exc}") from exc
        return cls.from_dict(data)


@dataclass
class ListEnvelope(Model):
    """Paginated list wrapper.

    Subclasses declare exactly one extra field holding the items.
    """

    start: Optional[int] = None
    limit: Optional[int] = None
    length: Optional[int] = None
    total: Optional[int] = None
    next: Optional[str] = None

    @classmethod
    def _items_field(cls) -> str:
        base = {f.name for f in fields(ListEnvelope)}
        return next(f.name for f in fields(cls) if f.name not in base)

    @classmethod
    def from_items(cls: Type[M], raw: List[Any]) -> M:
        """Wrap a bare JSON array (returned when totals are not requested)."""
        name = cls._items_field()
        key = next(f.metadata.get("key", f.name) for f in fields(cls) if f.name == name)
        return cls.from_dict({key: raw})

    def items(self) -> List[Any]:
        return getattr(self, self._items_field()) or []

    def has_next(self) -> bool:
        """Whether another page exists after this one."""
        if self.next:
            return True
        return (self.start or 0) + (self.length or 0) < (self.total or 0)


def stringify(value: Any) -> str:
    """Indented JSON rendering of a model, list or mapping."""
    return json.dumps(encode_value(value), indent=2)


__all__ = [
    "NULL",
    "Model",
    "ListEnvelope",
    "FieldCodec",
    "TriStateList",
    "LenientBool",
    "LenientString",
    "Variant",
    "attr",
    "decode_value",
    "decode_variant",
    "encode_value",
    "stringify",
]

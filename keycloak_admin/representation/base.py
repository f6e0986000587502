"""Typed, immutable views of Keycloak JSON objects.

Representations are frozen dataclasses. Attribute names are the snake_case
forms of Keycloak's camelCase JSON keys; a field can override its JSON key
with ``json_field``. Nested objects are declared with ``nested`` and decoded
recursively. Keys the class does not declare are kept in ``extra`` and sent
back on encode, so fetch-modify-update cycles never drop server fields.
"""
from __future__ import annotations
import copy
import dataclasses
from dataclasses import dataclass, field, fields
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

R = TypeVar("R", bound="Representation")

SELF = object()


def nested(representation, *, many: bool = False, json: Optional[str] = None):
    """Declare a field holding a nested representation (or a list of them).

    Pass SELF for fields that hold the declaring class, e.g. subgroups.
    """
    metadata = {"representation": representation, "many": many}
    if json:
        metadata["json"] = json
    return field(default=None, metadata=metadata)


def json_field(name: str):
    """Declare a field whose JSON key is not the camelCase of its name."""
    return field(default=None, metadata={"json": name})


def to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _json_name(f: dataclasses.Field) -> str:
    return f.metadata.get("json") or to_camel(f.name)


@lru_cache(maxsize=None)
def _fields_by_json(cls: type) -> Dict[str, dataclasses.Field]:
    return {_json_name(f): f for f in fields(cls) if f.name != "extra"}


@lru_cache(maxsize=None)
def _field_names(cls: type) -> frozenset:
    return frozenset(f.name for f in fields(cls) if f.name != "extra")


def _decode(owner: type, f: dataclasses.Field, value: Any) -> Any:
    representation = f.metadata.get("representation")
    if representation is SELF:
        representation = owner
    if representation is None or value is None:
        return value
    if f.metadata.get("many"):
        return tuple(representation.from_json(item) for item in value)
    return representation.from_json(value)


def _encode(value: Any) -> Any:
    if isinstance(value, Representation):
        return value.to_json()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    if isinstance(value, Mapping):
        return {key: _encode(item) for key, item in value.items()}
    return value


@dataclass(frozen=True, kw_only=True)
class Representation:
    """Base class for all Keycloak representations."""

    extra: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self):
        # each instance owns a read-only snapshot of its undeclared keys
        object.__setattr__(self, "extra", MappingProxyType(copy.deepcopy(dict(self.extra))))

    @classmethod
    def from_json(cls: Type[R], data: Mapping[str, Any]) -> R:
        """Decode a JSON object; undeclared keys are kept in ``extra``."""
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise TypeError(f"{cls.__name__} expects a JSON object, got {type(data).__name__}")

        by_json = _fields_by_json(cls)
        values: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, value in data.items():
            f = by_json.get(key)
            if f is None:
                extra[key] = value
            else:
                values[f.name] = _decode(cls, f, value)
        return cls(**values, extra=extra)

    def to_json(self) -> Dict[str, Any]:
        """Encode to a JSON-ready dict, omitting unset attributes."""
        data: Dict[str, Any] = copy.deepcopy(dict(self.extra))
        for f in fields(self):
            if f.name == "extra":
                continue
            value = getattr(self, f.name)
            if value is not None:
                data[_json_name(f)] = _encode(value)
        return data

    def with_(self: R, **changes: Any) -> R:
        """Return a copy with the given attributes replaced."""
        unknown = set(changes) - _field_names(type(self))
        if unknown:
            raise AttributeError(f"{type(self).__name__} has no attribute(s) {sorted(unknown)}")
        return dataclasses.replace(self, **changes)

    def __getattr__(self, name: str):
        # with_first_name(value) -> with_(first_name=value)
        if name.startswith("with_") and name[5:] in _field_names(type(self)):
            attribute = name[5:]
            return lambda value: self.with_(**{attribute: value})
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

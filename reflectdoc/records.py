"""Normalized documentation records produced by the resolvers.

Every record is immutable. Optional facts are ``None`` when absent and
collections are ``None`` rather than empty, so the serialized form only
carries keys that hold information. Boolean flags are plain ``bool`` and are
left out of the serialized form when false.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Tuple, Union

from .collaborators.meta import SourceMetadata
from .collaborators.types import TypeDescriptor

DefaultValue = Union[str, bool, int, float]

PRIVATE = "private"
STATIC = "static"


def _wire(name: str) -> Dict[str, str]:
    return {"wire": name}


def _flag() -> Any:
    return field(default=False, metadata={"flag": True})


class _Record:
    def as_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready form, omitting absent values and false flags."""
        data: Dict[str, Any] = {}
        for item in fields(self):  # type: ignore[arg-type]
            value = getattr(self, item.name)
            if value is None or value == ():
                continue
            if item.metadata.get("flag") and value is False:
                continue
            data[item.metadata.get("wire", item.name)] = _serialise(value)
        return data


def _serialise(value: Any) -> Any:
    if isinstance(value, (_Record, TypeDescriptor, SourceMetadata)):
        return value.as_dict()
    if isinstance(value, tuple):
        return [_serialise(item) for item in value]
    return value


@dataclass(frozen=True)
class ParameterRecord(_Record):
    name: str
    description: Optional[str] = None
    optional: bool = _flag()
    default: Optional[DefaultValue] = None
    type: Optional[TypeDescriptor] = None


@dataclass(frozen=True)
class CallableRecord(_Record):
    """Shared shape for methods, constructors and events."""

    name: str
    description: Optional[str] = None
    see: Optional[Tuple[str, ...]] = None
    scope: Optional[str] = None
    access: Optional[str] = None
    examples: Optional[Tuple[str, ...]] = None
    abstract: bool = _flag()
    deprecated: bool = _flag()
    emits: Optional[Tuple[str, ...]] = None
    params: Optional[Tuple[ParameterRecord, ...]] = None
    returns: Optional[TypeDescriptor] = None
    returns_description: Optional[str] = field(default=None, metadata=_wire("returnsDescription"))
    meta: Optional[SourceMetadata] = None


@dataclass(frozen=True)
class PropertyRecord(_Record):
    name: str
    description: Optional[str] = None
    see: Optional[Tuple[str, ...]] = None
    scope: Optional[str] = None
    access: Optional[str] = None
    readonly: bool = _flag()
    abstract: bool = _flag()
    deprecated: bool = _flag()
    default: Optional[DefaultValue] = None
    type: Optional[TypeDescriptor] = None
    meta: Optional[SourceMetadata] = None


@dataclass(frozen=True)
class ClassRecord(_Record):
    name: str
    description: Optional[str] = None
    see: Optional[Tuple[str, ...]] = None
    extends: Optional[TypeDescriptor] = None
    implements: Optional[TypeDescriptor] = None
    access: Optional[str] = None
    abstract: bool = _flag()
    deprecated: bool = _flag()
    construct: Optional[CallableRecord] = None
    props: Optional[Tuple[PropertyRecord, ...]] = None
    methods: Optional[Tuple[CallableRecord, ...]] = None
    events: Optional[Tuple[CallableRecord, ...]] = None
    meta: Optional[SourceMetadata] = None
    is_non_exported: bool = field(default=False, metadata={"flag": True, "wire": "isNonExported"})


__all__ = [
    "CallableRecord",
    "ClassRecord",
    "DefaultValue",
    "PRIVATE",
    "ParameterRecord",
    "PropertyRecord",
    "STATIC",
]

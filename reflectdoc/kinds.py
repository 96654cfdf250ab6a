"""Classification of class members into the shapes the resolvers understand."""

from __future__ import annotations

from enum import Enum

from .models import ReflectionNode


class MemberKind(Enum):
    CONSTRUCTOR = "constructor"
    PROPERTY = "property"
    ACCESSOR = "accessor"
    SETTER_ONLY_ACCESSOR = "setter-only accessor"
    METHOD = "method"
    EVENT = "event"
    OTHER = "other"

    @property
    def is_property_like(self) -> bool:
        return self in (MemberKind.PROPERTY, MemberKind.ACCESSOR)


_BY_KIND_NAME = {
    "Constructor": MemberKind.CONSTRUCTOR,
    "Property": MemberKind.PROPERTY,
    "Method": MemberKind.METHOD,
    "Event": MemberKind.EVENT,
}


def classify_member(node: ReflectionNode) -> MemberKind:
    """Map a child of a class node to exactly one :class:`MemberKind`."""
    if node.kind == "Accessor":
        if node.get_signature:
            return MemberKind.ACCESSOR
        return MemberKind.SETTER_ONLY_ACCESSOR
    return _BY_KIND_NAME.get(node.kind or "", MemberKind.OTHER)


__all__ = ["MemberKind", "classify_member"]

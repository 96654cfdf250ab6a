"""Shared plumbing for the resolvers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from ..collaborators import (
    SourceMetadata,
    TypeDescriptor,
    resolve_description,
    resolve_source_metadata,
    resolve_type,
)
from ..models import ReflectionNode
from ..records import PRIVATE, STATIC, DefaultValue
from ..tags import is_private, tag_text

# TypeDoc writes this when a default exists but cannot be printed.
ELISION_PLACEHOLDER = "..."

TypeResolver = Callable[..., TypeDescriptor]
DescriptionResolver = Callable[[ReflectionNode], Optional[str]]
MetadataResolver = Callable[[ReflectionNode], Optional[SourceMetadata]]


class ResolutionError(RuntimeError):
    """Raised when a resolver is handed a node it must never receive."""


class MissingGetterError(ResolutionError):
    """An accessor without a get-signature reached the property resolver."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Can't resolve accessor '{name}' without a getter")
        self.name = name


@dataclass(frozen=True)
class Collaborators:
    """The type, description and source-metadata helpers a resolver delegates to."""

    resolve_type: TypeResolver = resolve_type
    resolve_description: DescriptionResolver = resolve_description
    resolve_source_metadata: MetadataResolver = resolve_source_metadata

    def type_of(
        self, type_node: Optional[Mapping[str, Any]], optional: bool = False
    ) -> Optional[TypeDescriptor]:
        if type_node is None:
            return None
        return self.resolve_type(type_node, optional)


DEFAULT_COLLABORATORS = Collaborators()


def resolve_access(node: ReflectionNode, tags_from: Optional[ReflectionNode] = None) -> Optional[str]:
    """``"private"`` when the node's flag or the tags of ``tags_from`` say so."""
    source = tags_from if tags_from is not None else node
    if node.flags.is_private or is_private(source):
        return PRIVATE
    return None


def resolve_scope(node: ReflectionNode) -> Optional[str]:
    return STATIC if node.flags.is_static else None


def recorded_default(node: ReflectionNode) -> Optional[DefaultValue]:
    if node.default_value == ELISION_PLACEHOLDER:
        return None
    return node.default_value


def resolve_default(node: ReflectionNode) -> Optional[DefaultValue]:
    """The ``@default`` tag text wins over the recorded default value."""
    text = tag_text(node, "default")
    if text is not None:
        return text
    return recorded_default(node)


__all__ = [
    "Collaborators",
    "DEFAULT_COLLABORATORS",
    "ELISION_PLACEHOLDER",
    "MissingGetterError",
    "ResolutionError",
    "recorded_default",
    "resolve_access",
    "resolve_default",
    "resolve_scope",
]

"""Top-level resolution of class declarations."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import List, Optional, Sequence, Tuple, TypeVar

from ..collaborators import SourceMetadata
from ..kinds import MemberKind, classify_member
from ..logging import get_logger
from ..models import ReflectionNode
from ..records import ClassRecord
from ..tags import has_tag, tag_texts
from .base import DEFAULT_COLLABORATORS, Collaborators, resolve_access
from .methods import MethodResolver
from .properties import PropertyResolver

logger = get_logger("resolvers.classes")

DEFAULT_EXPORT_NAME = "default"

T = TypeVar("T")


@dataclass
class _Members:
    constructor: Optional[ReflectionNode] = None
    props: List[ReflectionNode] = field(default_factory=list)
    methods: List[ReflectionNode] = field(default_factory=list)
    events: List[ReflectionNode] = field(default_factory=list)


class ClassResolver:
    """Assembles a :class:`ClassRecord` from a class node and its members."""

    def __init__(
        self,
        collaborators: Collaborators = DEFAULT_COLLABORATORS,
        *,
        properties: PropertyResolver | None = None,
        methods: MethodResolver | None = None,
    ) -> None:
        self._collaborators = collaborators
        self._properties = properties or PropertyResolver(collaborators)
        self._methods = methods or MethodResolver(collaborators)

    def resolve(self, node: ReflectionNode) -> ClassRecord:
        members = self._classify(node)
        meta = self._collaborators.resolve_source_metadata(node)
        extended = node.extended_types[0] if node.extended_types else None
        implemented = node.implemented_types[0] if node.implemented_types else None

        construct = None
        if members.constructor is not None:
            construct = self._methods.resolve(members.constructor)

        record = ClassRecord(
            name=self._resolve_name(node, meta),
            description=self._collaborators.resolve_description(node),
            see=tag_texts(node, "see"),
            extends=self._collaborators.type_of(extended),
            implements=self._collaborators.type_of(implemented),
            access=resolve_access(node),
            abstract=has_tag(node, "abstract") or node.flags.is_abstract,
            deprecated=has_tag(node, "deprecated"),
            construct=construct,
            props=_non_empty([self._properties.resolve(child) for child in members.props]),
            methods=_non_empty([self._methods.resolve(child) for child in members.methods]),
            events=_non_empty([self._methods.resolve(child) for child in members.events]),
            meta=meta,
            is_non_exported=node.is_non_exported,
        )
        logger.debug(
            "Resolved class %s: %d props, %d methods, %d events",
            record.name,
            len(members.props),
            len(members.methods),
            len(members.events),
        )
        return record

    @staticmethod
    def _resolve_name(node: ReflectionNode, meta: Optional[SourceMetadata]) -> str:
        if node.name != DEFAULT_EXPORT_NAME:
            return node.name
        if meta is None:
            return DEFAULT_EXPORT_NAME
        return PurePosixPath(meta.file).stem

    @staticmethod
    def _classify(node: ReflectionNode) -> _Members:
        members = _Members()
        for child in node.children:
            kind = classify_member(child)
            if kind is MemberKind.CONSTRUCTOR:
                if members.constructor is None:
                    members.constructor = child
            elif kind.is_property_like:
                members.props.append(child)
            elif kind is MemberKind.METHOD:
                members.methods.append(child)
            elif kind is MemberKind.EVENT:
                members.events.append(child)
            elif kind is MemberKind.SETTER_ONLY_ACCESSOR:
                # Typings keep set-only accessors, the docs do not show them.
                logger.debug("Skipping set-only accessor %s.%s", node.name, child.name)
        return members


def _non_empty(items: Sequence[T]) -> Optional[Tuple[T, ...]]:
    return tuple(items) if items else None


def resolve_class(
    node: ReflectionNode, collaborators: Collaborators = DEFAULT_COLLABORATORS
) -> ClassRecord:
    """Resolve one class node into its documentation record."""
    return ClassResolver(collaborators).resolve(node)


__all__ = ["ClassResolver", "DEFAULT_EXPORT_NAME", "resolve_class"]

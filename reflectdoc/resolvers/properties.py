"""Resolution of properties and getter/setter accessor pairs."""

from __future__ import annotations

from dataclasses import replace

from ..kinds import MemberKind, classify_member
from ..logging import get_logger
from ..models import ReflectionNode
from ..records import PropertyRecord
from ..tags import has_tag, tag_texts
from .base import (
    DEFAULT_COLLABORATORS,
    Collaborators,
    MissingGetterError,
    resolve_access,
    resolve_default,
    resolve_scope,
)

logger = get_logger("resolvers.properties")


class PropertyResolver:
    """Builds a :class:`PropertyRecord` from a property or accessor node."""

    def __init__(self, collaborators: Collaborators = DEFAULT_COLLABORATORS) -> None:
        self._collaborators = collaborators

    def resolve(self, node: ReflectionNode) -> PropertyRecord:
        kind = classify_member(node)
        if kind is MemberKind.SETTER_ONLY_ACCESSOR:
            raise MissingGetterError(node.name)

        base = self._resolve_plain(node)
        if kind is not MemberKind.ACCESSOR:
            return base
        return self._merge_accessor(node, base)

    def _resolve_plain(self, node: ReflectionNode) -> PropertyRecord:
        return PropertyRecord(
            name=node.name,
            description=self._collaborators.resolve_description(node),
            see=tag_texts(node, "see"),
            scope=resolve_scope(node),
            access=resolve_access(node),
            readonly=node.flags.is_readonly,
            abstract=has_tag(node, "abstract"),
            deprecated=has_tag(node, "deprecated"),
            default=resolve_default(node),
            type=self._collaborators.type_of(node.type, node.flags.is_optional),
            meta=self._collaborators.resolve_source_metadata(node),
        )

    def _merge_accessor(self, node: ReflectionNode, base: PropertyRecord) -> PropertyRecord:
        # The getter carries the documentation a reader sees. Scope, readonly and
        # the accessor's own default stay with the accessor container.
        getter = node.get_signature[0]
        has_setter = bool(node.set_signature)
        if not has_setter:
            logger.debug("Accessor %s has no setter, marking readonly", node.name)

        default = base.default
        if default is None:
            default = resolve_default(getter)

        return replace(
            base,
            description=self._collaborators.resolve_description(getter),
            see=tag_texts(getter, "see"),
            access=resolve_access(getter),
            readonly=base.readonly or not has_setter,
            abstract=has_tag(getter, "abstract"),
            deprecated=has_tag(getter, "deprecated"),
            default=default,
            type=self._collaborators.type_of(getter.type),
        )


__all__ = ["PropertyResolver"]

"""Resolution of methods, constructors and events into callable records."""

from __future__ import annotations

from ..logging import get_logger
from ..models import ReflectionNode
from ..records import CallableRecord
from ..tags import has_tag, tag_texts
from .base import DEFAULT_COLLABORATORS, Collaborators, resolve_access, resolve_scope
from .params import ParamResolver

logger = get_logger("resolvers.methods")


class MethodResolver:
    """Builds a :class:`CallableRecord` from a node and its first call signature.

    Events go through the same path: their parameters describe the payload.
    Documentation is read from the signature, while the static flag and the
    source location only exist on the node itself.
    """

    def __init__(
        self,
        collaborators: Collaborators = DEFAULT_COLLABORATORS,
        params: ParamResolver | None = None,
    ) -> None:
        self._collaborators = collaborators
        self._params = params or ParamResolver(collaborators)

    def resolve(self, node: ReflectionNode) -> CallableRecord:
        signature = self.select_signature(node)
        if len(node.signatures) > 1:
            logger.debug(
                "%s has %d overloads, documenting the first", node.name, len(node.signatures)
            )

        params = None
        if signature.parameters:
            params = tuple(self._params.resolve(param) for param in signature.parameters)

        returns_description = None
        if signature.comment is not None and signature.comment.returns is not None:
            returns_description = signature.comment.returns.strip()

        return CallableRecord(
            name=node.name,
            description=self._collaborators.resolve_description(signature),
            see=tag_texts(signature, "see"),
            scope=resolve_scope(node),
            access=resolve_access(node, tags_from=signature),
            examples=tag_texts(signature, "example"),
            abstract=has_tag(signature, "abstract"),
            deprecated=has_tag(signature, "deprecated"),
            emits=tag_texts(signature, "emits"),
            params=params,
            returns=self._collaborators.type_of(signature.type),
            returns_description=returns_description,
            meta=self._collaborators.resolve_source_metadata(node),
        )

    @staticmethod
    def select_signature(node: ReflectionNode) -> ReflectionNode:
        return node.signatures[0] if node.signatures else node


__all__ = ["MethodResolver"]

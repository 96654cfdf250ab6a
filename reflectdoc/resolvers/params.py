"""Resolution of call-signature parameters."""

from __future__ import annotations

from ..models import ReflectionNode
from ..records import ParameterRecord
from .base import DEFAULT_COLLABORATORS, Collaborators, resolve_default


class ParamResolver:
    """Turns one declared parameter into a :class:`ParameterRecord`."""

    def __init__(self, collaborators: Collaborators = DEFAULT_COLLABORATORS) -> None:
        self._collaborators = collaborators

    def resolve(self, param: ReflectionNode) -> ParameterRecord:
        # Any recorded default makes the parameter optional, even the elided one.
        optional = param.flags.is_optional or param.default_value is not None
        return ParameterRecord(
            name=param.name,
            description=self._collaborators.resolve_description(param),
            optional=optional,
            default=resolve_default(param),
            type=self._collaborators.type_of(param.type),
        )


__all__ = ["ParamResolver"]

"""Resolvers turning reflection nodes into documentation records."""

from .base import (
    Collaborators,
    DEFAULT_COLLABORATORS,
    ELISION_PLACEHOLDER,
    MissingGetterError,
    ResolutionError,
)
from .classes import ClassResolver, resolve_class
from .methods import MethodResolver
from .params import ParamResolver
from .properties import PropertyResolver

__all__ = [
    "ClassResolver",
    "Collaborators",
    "DEFAULT_COLLABORATORS",
    "ELISION_PLACEHOLDER",
    "MethodResolver",
    "MissingGetterError",
    "ParamResolver",
    "PropertyResolver",
    "ResolutionError",
    "resolve_class",
]

"""Normalize TypeDoc reflection trees into class documentation records."""

from .models import ReflectionNode, parse_node
from .records import CallableRecord, ClassRecord, ParameterRecord, PropertyRecord
from .resolvers import MissingGetterError, resolve_class

__version__ = "0.1.0"

__all__ = [
    "CallableRecord",
    "ClassRecord",
    "MissingGetterError",
    "ParameterRecord",
    "PropertyRecord",
    "ReflectionNode",
    "parse_node",
    "resolve_class",
]

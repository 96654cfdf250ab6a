"""Default implementations of the helpers the resolvers delegate to."""

from .description import resolve_description
from .meta import SourceMetadata, resolve_source_metadata
from .types import TypeDescriptor, render_type, resolve_type

__all__ = [
    "SourceMetadata",
    "TypeDescriptor",
    "render_type",
    "resolve_description",
    "resolve_source_metadata",
    "resolve_type",
]

"""Free-text description extraction from doc comments."""

from __future__ import annotations

from typing import Optional

from ..models import ReflectionNode


def resolve_description(node: ReflectionNode) -> Optional[str]:
    """Join the summary and body of a node's comment, or return ``None``."""
    comment = node.comment
    if comment is None:
        return None
    parts = [part.strip() for part in (comment.short_text, comment.text) if part and part.strip()]
    if not parts:
        return None
    return "\n\n".join(parts)


__all__ = ["resolve_description"]

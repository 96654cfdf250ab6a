"""Lookups over the comment tags of a reflection node."""

from __future__ import annotations

from typing import Optional, Tuple

from .models import CommentTag, ReflectionNode

PRIVATE_TAGS = frozenset({"private", "internal"})


def find_tag(node: ReflectionNode, name: str) -> Optional[CommentTag]:
    """Return the first tag called ``name``, if any."""
    for tag in node.tags:
        if tag.tag == name:
            return tag
    return None


def has_tag(node: ReflectionNode, *names: str) -> bool:
    return any(tag.tag in names for tag in node.tags)


def tag_text(node: ReflectionNode, name: str) -> Optional[str]:
    """Return the stripped text of the first ``name`` tag.

    A tag that is present but has no text yields ``""``, not ``None``.
    """
    tag = find_tag(node, name)
    return tag.text.strip() if tag is not None else None


def tag_texts(node: ReflectionNode, name: str) -> Optional[Tuple[str, ...]]:
    """Return the stripped texts of every ``name`` tag, or ``None`` when there are none."""
    texts = tuple(tag.text.strip() for tag in node.tags if tag.tag == name)
    return texts or None


def is_private(node: ReflectionNode) -> bool:
    return has_tag(node, *PRIVATE_TAGS)


__all__ = ["PRIVATE_TAGS", "find_tag", "has_tag", "is_private", "tag_text", "tag_texts"]

"""Immutable view of the TypeDoc reflection tree consumed by the resolvers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

# Block tags whose content the current comment layout wraps in a fenced code block.
_CODE_BLOCK_TAGS = frozenset({"default", "example"})
_CODE_FENCE = re.compile(r"^```[\w+-]*[ \t]*\n?(.*?)\n?```$", re.DOTALL)

# Only exports without ``kindString`` need these, and those come from releases
# whose numbering has no Event kind (8388608 is Document there). Events are
# recognised through ``kindString`` alone.
_NUMERIC_KINDS: Dict[int, str] = {
    16: "Enumeration Member",
    32: "Variable",
    64: "Function",
    128: "Class",
    256: "Interface",
    512: "Constructor",
    1024: "Property",
    2048: "Method",
    4096: "Call signature",
    8192: "Index signature",
    16384: "Constructor signature",
    32768: "Parameter",
    65536: "Type literal",
    131072: "Type parameter",
    262144: "Accessor",
    524288: "Get signature",
    1048576: "Set signature",
}


@dataclass(frozen=True)
class CommentTag:
    """One ``@tag text`` annotation, stored without the leading ``@``."""

    tag: str
    text: str = ""


@dataclass(frozen=True)
class Comment:
    """Doc comment attached to a reflection or signature."""

    short_text: Optional[str] = None
    text: Optional[str] = None
    returns: Optional[str] = None
    tags: Tuple[CommentTag, ...] = ()


@dataclass(frozen=True)
class ReflectionFlags:
    is_private: bool = False
    is_protected: bool = False
    is_static: bool = False
    is_readonly: bool = False
    is_abstract: bool = False
    is_optional: bool = False
    is_rest: bool = False
    is_external: bool = False


@dataclass(frozen=True)
class SourceReference:
    file_name: str
    line: Optional[int] = None
    character: Optional[int] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class ReflectionNode:
    """A declaration, signature or parameter from the reflection tree."""

    name: str
    kind: Optional[str] = None
    id: Optional[int] = None
    flags: ReflectionFlags = field(default_factory=ReflectionFlags)
    comment: Optional[Comment] = None
    children: Tuple["ReflectionNode", ...] = ()
    signatures: Tuple["ReflectionNode", ...] = ()
    get_signature: Tuple["ReflectionNode", ...] = ()
    set_signature: Tuple["ReflectionNode", ...] = ()
    parameters: Optional[Tuple["ReflectionNode", ...]] = None
    type: Optional[Mapping[str, Any]] = None
    default_value: Optional[Any] = None
    extended_types: Tuple[Mapping[str, Any], ...] = ()
    implemented_types: Tuple[Mapping[str, Any], ...] = ()
    sources: Tuple[SourceReference, ...] = ()
    is_non_exported: bool = False

    @property
    def tags(self) -> Tuple[CommentTag, ...]:
        return self.comment.tags if self.comment is not None else ()


def parse_node(payload: Mapping[str, Any]) -> ReflectionNode:
    """Build a :class:`ReflectionNode` from raw TypeDoc JSON.

    Parsing never fails on partial input: unknown or malformed fields are
    dropped and show up as absent values downstream.
    """
    if not isinstance(payload, Mapping):
        return ReflectionNode(name="")

    parameters = payload.get("parameters")
    return ReflectionNode(
        name=_as_str(payload.get("name")) or "",
        kind=_parse_kind(payload),
        id=payload.get("id") if isinstance(payload.get("id"), int) else None,
        flags=_parse_flags(payload.get("flags")),
        comment=_parse_comment(payload.get("comment")),
        children=_parse_nodes(payload.get("children")),
        signatures=_parse_nodes(payload.get("signatures")),
        get_signature=_parse_nodes(payload.get("getSignature")),
        set_signature=_parse_nodes(payload.get("setSignature")),
        parameters=_parse_nodes(parameters) if isinstance(parameters, list) else None,
        type=payload.get("type") if isinstance(payload.get("type"), Mapping) else None,
        default_value=_parse_default(payload.get("defaultValue")),
        extended_types=_as_type_list(payload.get("extendedTypes")),
        implemented_types=_as_type_list(payload.get("implementedTypes")),
        sources=_parse_sources(payload.get("sources")),
        is_non_exported=payload.get("isNonExported") is True,
    )


def _parse_kind(payload: Mapping[str, Any]) -> Optional[str]:
    kind_string = payload.get("kindString")
    if isinstance(kind_string, str) and kind_string:
        return kind_string
    kind = payload.get("kind")
    if isinstance(kind, int) and not isinstance(kind, bool):
        return _NUMERIC_KINDS.get(kind)
    return None


def _parse_nodes(value: Any) -> Tuple[ReflectionNode, ...]:
    # Newer TypeDoc releases emit a single object for get/set signatures.
    if isinstance(value, Mapping):
        return (parse_node(value),)
    if isinstance(value, list):
        return tuple(parse_node(item) for item in value if isinstance(item, Mapping))
    return ()


def _parse_flags(value: Any) -> ReflectionFlags:
    if not isinstance(value, Mapping):
        return ReflectionFlags()
    return ReflectionFlags(
        is_private=value.get("isPrivate") is True,
        is_protected=value.get("isProtected") is True,
        is_static=value.get("isStatic") is True,
        is_readonly=value.get("isReadonly") is True,
        is_abstract=value.get("isAbstract") is True,
        is_optional=value.get("isOptional") is True,
        is_rest=value.get("isRest") is True,
        is_external=value.get("isExternal") is True,
    )


def _parse_comment(value: Any) -> Optional[Comment]:
    if not isinstance(value, Mapping):
        return None
    if "summary" in value or "blockTags" in value or "modifierTags" in value:
        return _parse_structured_comment(value)

    tags = []
    for raw in _as_list(value.get("tags")):
        if not isinstance(raw, Mapping):
            continue
        name = _as_str(raw.get("tag"))
        if not name:
            continue
        tags.append(CommentTag(tag=name.lstrip("@"), text=_as_str(raw.get("text")) or ""))
    return Comment(
        short_text=_as_str(value.get("shortText")),
        text=_as_str(value.get("text")),
        returns=_as_str(value.get("returns")),
        tags=tuple(tags),
    )


def _parse_structured_comment(value: Mapping[str, Any]) -> Comment:
    returns: Optional[str] = None
    tags = []
    for raw in _as_list(value.get("blockTags")):
        if not isinstance(raw, Mapping):
            continue
        name = (_as_str(raw.get("tag")) or "").lstrip("@")
        if not name:
            continue
        text = _join_parts(raw.get("content"), unfence=name in _CODE_BLOCK_TAGS)
        if name in {"returns", "return"}:
            returns = text
            continue
        tags.append(CommentTag(tag=name, text=text))
    for raw in _as_list(value.get("modifierTags")):
        name = (_as_str(raw) or "").lstrip("@")
        if name:
            tags.append(CommentTag(tag=name))
    summary = _join_parts(value.get("summary"))
    return Comment(short_text=summary or None, returns=returns, tags=tuple(tags))


def _join_parts(parts: Any, *, unfence: bool = False) -> str:
    texts = []
    for part in _as_list(parts):
        if not isinstance(part, Mapping) or not isinstance(part.get("text"), str):
            continue
        text = part["text"]
        if unfence and part.get("kind") == "code":
            text = _strip_fence(text)
        texts.append(text)
    return "".join(texts)


def _strip_fence(text: str) -> str:
    match = _CODE_FENCE.match(text.strip())
    return match.group(1) if match else text


def _parse_sources(value: Any) -> Tuple[SourceReference, ...]:
    if not isinstance(value, list):
        return ()
    sources = []
    for raw in value:
        if not isinstance(raw, Mapping):
            continue
        file_name = _as_str(raw.get("fileName"))
        if not file_name:
            continue
        sources.append(
            SourceReference(
                file_name=file_name,
                line=_as_int(raw.get("line")),
                character=_as_int(raw.get("character")),
                url=_as_str(raw.get("url")),
            )
        )
    return tuple(sources)


def _parse_default(value: Any) -> Optional[Any]:
    if isinstance(value, (str, bool, int, float)):
        return value
    return None


def _as_type_list(value: Any) -> Tuple[Mapping[str, Any], ...]:
    if not isinstance(value, Sequence) or isinstance(value, str):
        return ()
    return tuple(item for item in value if isinstance(item, Mapping))


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


__all__ = [
    "Comment",
    "CommentTag",
    "ReflectionFlags",
    "ReflectionNode",
    "SourceReference",
    "parse_node",
]

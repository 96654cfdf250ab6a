"""Rendering of TypeDoc type nodes into portable type descriptors."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

_NULLISH = {"null", "undefined"}


@dataclass(frozen=True)
class TypeDescriptor:
    """A declared type reduced to its rendered alternatives.

    Nullability, optionality and rest-ness live here and nowhere else in the
    documentation records.
    """

    names: Tuple[str, ...]
    nullable: bool = False
    optional: bool = False
    variable: bool = False

    def as_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"names": list(self.names)}
        if self.nullable:
            data["nullable"] = True
        if self.optional:
            data["optional"] = True
        if self.variable:
            data["variable"] = True
        return data


def resolve_type(type_node: Mapping[str, Any], optional: bool = False) -> TypeDescriptor:
    """Convert a type node into a :class:`TypeDescriptor`.

    ``rest`` and ``optional`` wrappers are unwrapped into flags, and a
    top-level union loses its ``null``/``undefined`` members in favour of
    ``nullable``.
    """
    variable = False
    node = type_node
    kind = node.get("type")
    if kind == "rest":
        variable = True
        node = _as_mapping(node.get("elementType"))
    elif kind == "optional":
        optional = True
        node = _as_mapping(node.get("elementType"))

    nullable = False
    if node.get("type") == "union":
        names: List[str] = []
        for member in _as_list(node.get("types")):
            rendered = render_type(member)
            if rendered in _NULLISH:
                nullable = True
            else:
                names.append(rendered)
        if not names:
            names = ["null"] if nullable else []
    else:
        names = [render_type(node)]

    return TypeDescriptor(
        names=tuple(names), nullable=nullable, optional=optional, variable=variable
    )


def render_type(node: Any) -> str:
    """Render a single type node as TypeScript-like source text."""
    if not isinstance(node, Mapping):
        return "unknown"
    renderer = _RENDERERS.get(node.get("type"))
    if renderer is None:
        return _name(node) or "unknown"
    return renderer(node)


def _render_reference(node: Mapping[str, Any]) -> str:
    name = _name(node) or "unknown"
    arguments = _as_list(node.get("typeArguments"))
    if not arguments:
        return name
    return f"{name}<{', '.join(render_type(arg) for arg in arguments)}>"


def _render_array(node: Mapping[str, Any]) -> str:
    element = _as_mapping(node.get("elementType"))
    rendered = render_type(element)
    if element.get("type") in {"union", "intersection", "reflection", "conditional"}:
        rendered = f"({rendered})"
    return f"{rendered}[]"


def _render_literal(node: Mapping[str, Any]) -> str:
    value = node.get("value")
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, Mapping):
        # bigint literals
        sign = "-" if value.get("negative") else ""
        return f"{sign}{value.get('value', '0')}n"
    return str(value)


def _render_tuple(node: Mapping[str, Any]) -> str:
    elements = _as_list(node.get("elements"))
    return f"[{', '.join(render_type(element) for element in elements)}]"


def _render_named_member(node: Mapping[str, Any]) -> str:
    marker = "?" if node.get("isOptional") else ""
    return f"{_name(node)}{marker}: {render_type(node.get('element'))}"


def _render_reflection(node: Mapping[str, Any]) -> str:
    declaration = _as_mapping(node.get("declaration"))
    signatures = _as_list(declaration.get("signatures"))
    if signatures:
        return _render_signature(_as_mapping(signatures[0]))
    children = _as_list(declaration.get("children"))
    if children:
        members = "; ".join(_render_member(_as_mapping(child)) for child in children)
        return f"{{ {members} }}"
    return "object"


def _render_signature(signature: Mapping[str, Any]) -> str:
    params = []
    for param in _as_list(signature.get("parameters")):
        param = _as_mapping(param)
        flags = _as_mapping(param.get("flags"))
        prefix = "..." if flags.get("isRest") else ""
        marker = "?" if flags.get("isOptional") else ""
        params.append(f"{prefix}{_name(param)}{marker}: {render_type(param.get('type'))}")
    returns = render_type(signature.get("type")) if signature.get("type") else "void"
    return f"({', '.join(params)}) => {returns}"


def _render_member(child: Mapping[str, Any]) -> str:
    flags = _as_mapping(child.get("flags"))
    marker = "?" if flags.get("isOptional") else ""
    return f"{_name(child)}{marker}: {render_type(child.get('type'))}"


def _render_predicate(node: Mapping[str, Any]) -> str:
    prefix = "asserts " if node.get("asserts") else ""
    target = node.get("targetType")
    if target is None:
        return f"{prefix}{_name(node)}"
    return f"{prefix}{_name(node)} is {render_type(target)}"


def _render_conditional(node: Mapping[str, Any]) -> str:
    return (
        f"{render_type(node.get('checkType'))} extends {render_type(node.get('extendsType'))}"
        f" ? {render_type(node.get('trueType'))} : {render_type(node.get('falseType'))}"
    )


def _render_mapped(node: Mapping[str, Any]) -> str:
    return (
        f"{{ [{node.get('parameter', 'K')} in {render_type(node.get('parameterType'))}]:"
        f" {render_type(node.get('templateType'))} }}"
    )


def _render_template_literal(node: Mapping[str, Any]) -> str:
    pieces = [str(node.get("head", ""))]
    for entry in _as_list(node.get("tail")):
        if isinstance(entry, list) and len(entry) == 2:
            pieces.append(f"${{{render_type(entry[0])}}}{entry[1]}")
    return f"`{''.join(pieces)}`"


def _joined(separator: str) -> Callable[[Mapping[str, Any]], str]:
    def _render(node: Mapping[str, Any]) -> str:
        members = _as_list(node.get("types"))
        return separator.join(render_type(member) for member in members)

    return _render


def _name(node: Mapping[str, Any]) -> Optional[str]:
    name = node.get("name")
    return name if isinstance(name, str) else None


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


_RENDERERS: Dict[str, Callable[[Mapping[str, Any]], str]] = {
    "intrinsic": lambda node: _name(node) or "unknown",
    "reference": _render_reference,
    "array": _render_array,
    "union": _joined(" | "),
    "intersection": _joined(" & "),
    "literal": _render_literal,
    "tuple": _render_tuple,
    "named-tuple-member": _render_named_member,
    "optional": lambda node: f"{render_type(node.get('elementType'))}?",
    "rest": lambda node: f"...{render_type(node.get('elementType'))}",
    "reflection": _render_reflection,
    "typeOperator": lambda node: f"{node.get('operator', '')} {render_type(node.get('target'))}",
    "indexedAccess": lambda node: (
        f"{render_type(node.get('objectType'))}[{render_type(node.get('indexType'))}]"
    ),
    "query": lambda node: f"typeof {render_type(node.get('queryType'))}",
    "predicate": _render_predicate,
    "conditional": _render_conditional,
    "mapped": _render_mapped,
    "templateLiteral": _render_template_literal,
    "inferred": lambda node: f"infer {_name(node) or 'T'}",
    "unknown": lambda node: _name(node) or "unknown",
}


__all__ = ["TypeDescriptor", "render_type", "resolve_type"]

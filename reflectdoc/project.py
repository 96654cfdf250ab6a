"""Whole-project documentation: walk a reflection tree and dump every class."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Any, Dict, Iterator, List, Sequence

from .config import ClassFilterConfig, OutputConfig
from .logging import get_logger
from .models import ReflectionNode, parse_node
from .records import PRIVATE, ClassRecord
from .resolvers import DEFAULT_COLLABORATORS, ClassResolver, Collaborators

logger = get_logger("project")

GENERATOR = "reflectdoc"
# Bump whenever the serialized record shapes change.
DOCUMENT_FORMAT = 1


class ReflectionLoadError(RuntimeError):
    """Raised when an input file is not a TypeDoc JSON object."""


def load_reflection(path: Path) -> ReflectionNode:
    """Read a TypeDoc JSON export from disk."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ReflectionLoadError(f"Failed to read reflection file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ReflectionLoadError(f"{path} must contain a JSON object at the root")
    return parse_node(data)


def iter_class_nodes(root: ReflectionNode) -> Iterator[ReflectionNode]:
    """Yield class nodes depth-first in declaration order, including nested ones."""
    for child in root.children:
        if child.kind == "Class":
            yield child
        yield from iter_class_nodes(child)


def document_project(
    root: ReflectionNode,
    filters: ClassFilterConfig | None = None,
    collaborators: Collaborators = DEFAULT_COLLABORATORS,
) -> List[ClassRecord]:
    """Resolve every class below ``root`` that passes ``filters``.

    A contract violation inside any class propagates and aborts the run, so a
    partially documented project is never returned.
    """
    filters = filters or ClassFilterConfig()
    resolver = ClassResolver(collaborators)
    records: List[ClassRecord] = []
    for node in iter_class_nodes(root):
        if filters.skip_non_exported and node.is_non_exported:
            logger.debug("Skipping non-exported class %s", node.name)
            continue
        record = resolver.resolve(node)
        if not _is_selected(record, filters):
            logger.debug("Class %s filtered out by configuration", record.name)
            continue
        records.append(record)
    logger.info("Documented %d classes", len(records))
    return records


def _is_selected(record: ClassRecord, filters: ClassFilterConfig) -> bool:
    if filters.skip_private and record.access == PRIVATE:
        return False
    if filters.include and not _matches(record.name, filters.include):
        return False
    if filters.exclude and _matches(record.name, filters.exclude):
        return False
    return True


def _matches(name: str, patterns: Sequence[str]) -> bool:
    return any(fnmatchcase(name, pattern) for pattern in patterns)


def build_document(
    records: Sequence[ClassRecord], *, generated_at: datetime | None = None
) -> Dict[str, Any]:
    """Wrap resolved classes with a generator header."""
    timestamp = generated_at or datetime.now(UTC)
    return {
        "meta": {
            "generator": GENERATOR,
            "format": DOCUMENT_FORMAT,
            "date": timestamp.isoformat().replace("+00:00", "Z"),
        },
        "classes": [record.as_dict() for record in records],
    }


def dump_document(document: Dict[str, Any], output: OutputConfig | None = None) -> str:
    output = output or OutputConfig()
    return json.dumps(document, indent=output.indent, sort_keys=output.sort_keys) + "\n"


def write_document(
    path: Path, document: Dict[str, Any], output: OutputConfig | None = None
) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_document(document, output), encoding="utf-8")


__all__ = [
    "DOCUMENT_FORMAT",
    "GENERATOR",
    "ReflectionLoadError",
    "build_document",
    "document_project",
    "dump_document",
    "iter_class_nodes",
    "load_reflection",
    "write_document",
]

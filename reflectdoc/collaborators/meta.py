"""Source-location metadata for documented declarations."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..models import ReflectionNode


@dataclass(frozen=True)
class SourceMetadata:
    """Where a declaration lives: ``file`` is the basename, ``path`` its directory."""

    file: str
    path: str
    line: Optional[int] = None
    url: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"file": self.file, "path": self.path}
        if self.line is not None:
            data["line"] = self.line
        if self.url is not None:
            data["url"] = self.url
        return data


def resolve_source_metadata(node: ReflectionNode) -> Optional[SourceMetadata]:
    """Describe the first recorded source location of ``node``."""
    if not node.sources:
        return None
    source = node.sources[0]
    # TypeDoc always reports forward-slash paths.
    file_name = source.file_name.replace("\\", "/")
    return SourceMetadata(
        file=posixpath.basename(file_name),
        path=posixpath.dirname(file_name),
        line=source.line,
        url=source.url,
    )


__all__ = ["SourceMetadata", "resolve_source_metadata"]

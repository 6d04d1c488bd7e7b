"""Concrete target graph produced from a workspace graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class Target:
    """A group of editable sources with the import paths they need."""

    name: str
    sources: list[Path] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)
    import_paths: list[Path] = field(default_factory=list)
    root: Path | None = None  # Folder shown in the workspace, if any


@dataclass
class Graph:
    """The editable workspace, ready to be turned into a descriptor."""

    name: str
    source_root: Path
    destination: Path
    tool_path: Path
    targets: list[Target] = field(default_factory=list)

    def target(self, name: str) -> Target | None:
        for target in self.targets:
            if target.name == name:
                return target
        return None


@dataclass
class WorkspaceDescriptor:
    """A generated workspace file, not yet written."""

    path: Path
    content: dict[str, Any]

"""Generating ``.code-workspace`` descriptors from a target graph."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from edith.generator.graph import Graph, WorkspaceDescriptor

WORKSPACE_EXTENSION = ".code-workspace"


class DescriptorGenerator:
    """Turns a graph into the JSON content of an editor workspace file."""

    def generate_workspace(self, graph: Graph) -> WorkspaceDescriptor:
        folders = []
        seen_roots: set[Path] = set()
        for target in graph.targets:
            if target.root is not None and target.root not in seen_roots:
                seen_roots.add(target.root)
                folders.append({"name": target.name, "path": str(target.root)})
        if not folders:
            folders.append({"name": graph.name, "path": str(graph.source_root)})

        extra_paths: list[str] = []
        for target in graph.targets:
            for path in target.import_paths:
                if str(path) not in extra_paths:
                    extra_paths.append(str(path))

        content: dict[str, Any] = {
            "folders": folders,
            "settings": {"python.analysis.extraPaths": extra_paths},
            "edith": {
                "tool": str(graph.tool_path),
                "sourceRoot": str(graph.source_root),
                "targets": [
                    {
                        "name": target.name,
                        "sources": [str(source) for source in target.sources],
                        "dependencies": list(target.dependencies),
                    }
                    for target in graph.targets
                ],
            },
        }

        return WorkspaceDescriptor(
            path=graph.destination / f"{graph.name}{WORKSPACE_EXTENSION}",
            content=content,
        )

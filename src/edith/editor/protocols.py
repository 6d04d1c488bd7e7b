"""Interfaces of the collaborators used by the project editor.

Default implementations live in :mod:`edith.discovery`, :mod:`edith.config`,
:mod:`edith.plugins` and :mod:`edith.generator`. Tests substitute their own.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from edith.config.schema import EditorConfig
from edith.generator.graph import Graph, WorkspaceDescriptor
from edith.models import (
    BuiltPluginModule,
    ManifestReference,
    PluginMetadata,
    PluginSet,
    WorkspaceGraph,
)


class ManifestFilesLocating(Protocol):
    def locate_project_manifests(self, directory: Path) -> list[ManifestReference]: ...

    def locate_config(self, directory: Path) -> Path | None: ...

    def locate_dependencies(self, directory: Path) -> Path | None: ...

    def locate_setup(self, directory: Path) -> Path | None: ...

    def locate_plugin_manifests(self, directory: Path) -> list[Path]: ...


class DirectoryLocating(Protocol):
    """Finds a helpers or templates directory for an editing directory."""

    def locate(self, directory: Path) -> Path | None: ...


class ResourceLocating(Protocol):
    def library_path(self) -> Path: ...

    def tool_path(self) -> Path: ...


class ConfigLoading(Protocol):
    def load_config(self, path: Path) -> EditorConfig: ...


class PluginServicing(Protocol):
    def load_plugins(self, config: EditorConfig) -> PluginSet: ...


class HelpersBuilding(Protocol):
    def build_plugins(
        self, root: Path, plugins: list[PluginMetadata]
    ) -> list[BuiltPluginModule]: ...


class GraphMapping(Protocol):
    def map(self, workspace_graph: WorkspaceGraph, name: str = "Manifests") -> Graph: ...


class DescriptorGenerating(Protocol):
    def generate_workspace(self, graph: Graph) -> WorkspaceDescriptor: ...


class WorkspaceWriting(Protocol):
    def write(self, descriptor: WorkspaceDescriptor) -> Path: ...

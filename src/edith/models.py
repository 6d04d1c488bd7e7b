"""Data model shared by the edit pipeline.

Everything here is created fresh for a single edit and discarded once the
workspace path has been returned.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Generic, TypeVar

T = TypeVar("T")


class ManifestKind(Enum):
    """Kinds of project manifests discovered in an editing directory."""

    PROJECT = "project"
    WORKSPACE = "workspace"


@dataclass(frozen=True)
class ManifestReference:
    """A discovered configuration manifest."""

    kind: ManifestKind
    path: Path


@dataclass(frozen=True)
class PluginMetadata:
    """A plugin as reported by the plugin service.

    ``name`` is the identifier declared in the plugin's own manifest.
    """

    name: str
    source_directory: Path


@dataclass(frozen=True)
class EditablePluginEntry:
    """A plugin included in the workspace as editable source."""

    name: str
    manifest_path: Path

    @property
    def directory(self) -> Path:
        return self.manifest_path.parent


@dataclass(frozen=True)
class BuiltPluginModule:
    """A plugin included as a precompiled dependency."""

    name: str
    path: Path


@dataclass(frozen=True)
class PluginSet:
    """Outcome of loading the plugins declared in a config.

    ``cache_directory`` is the configured cache, when plugins were loaded from
    a config.
    """

    helper_plugins: tuple[PluginMetadata, ...] = ()
    cache_directory: Path | None = None

    @classmethod
    def none(cls) -> PluginSet:
        return cls()


@dataclass(frozen=True)
class PathMetadata:
    """Scalar paths carried through assembly unchanged."""

    tool_path: Path
    source_root: Path
    destination: Path
    library_path: Path
    config_path: Path | None = None
    dependencies_path: Path | None = None
    setup_path: Path | None = None


@dataclass(frozen=True)
class WorkspaceGraph:
    """Everything the generator needs to materialize an editable workspace."""

    manifests: tuple[ManifestReference, ...]
    helpers: tuple[Path, ...]
    templates: tuple[Path, ...]
    editable_plugins: tuple[EditablePluginEntry, ...]
    built_modules: tuple[BuiltPluginModule, ...]
    paths: PathMetadata

    @property
    def manifest_paths(self) -> list[Path]:
        return [manifest.path for manifest in self.manifests]

    @property
    def is_editable(self) -> bool:
        # Built modules are dependencies, not editable sources
        return bool(self.manifests or self.editable_plugins or self.helpers or self.templates)


@dataclass(frozen=True)
class EditWarning:
    """A recovered failure reported while editing."""

    step: str
    message: str
    detail: str = ""


@dataclass
class StepResult(Generic[T]):
    """Value produced by a best-effort step, with the warning if it degraded."""

    value: T
    warning: EditWarning | None = None

    @property
    def degraded(self) -> bool:
        return self.warning is not None


@dataclass
class EditReport:
    """Result of a completed edit."""

    workspace_path: Path
    graph: WorkspaceGraph
    warnings: list[EditWarning] = field(default_factory=list)

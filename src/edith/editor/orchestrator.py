"""The edit pipeline.

Discovers the editable files of a directory, loads and resolves plugins,
builds the plugins that are not edited from source, assembles the workspace
graph and hands it to the generator. Plugin loading and plugin building are
best effort: their failures become warnings and the edit carries on without
plugins or without built modules. Every other failure stops the edit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TypeVar

from edith.config.loader import ConfigLoader
from edith.diagnostics import DiagnosticsSink, LoggingDiagnostics
from edith.discovery.directories import (
    HELPER_PATTERNS,
    TEMPLATE_PATTERNS,
    HelpersDirectoryLocator,
    TemplatesDirectoryLocator,
    glob_sources,
)
from edith.discovery.manifests import ManifestFilesLocator
from edith.discovery.resources import ResourceLocator
from edith.editor.assembler import GraphAssembler
from edith.editor.builder import HelperModuleBuilder
from edith.editor.protocols import (
    ConfigLoading,
    DescriptorGenerating,
    DirectoryLocating,
    GraphMapping,
    HelpersBuilding,
    ManifestFilesLocating,
    PluginServicing,
    ResourceLocating,
    WorkspaceWriting,
)
from edith.editor.resolver import PluginResolver
from edith.generator.descriptor import DescriptorGenerator
from edith.generator.mapper import MANIFESTS_TARGET, ProjectEditorMapper
from edith.generator.writer import WorkspaceWriter
from edith.models import EditReport, EditWarning, PathMetadata, PluginSet, StepResult
from edith.plugins.builder import HelpersBuilder
from edith.plugins.service import PluginService

logger = logging.getLogger(__name__)

T = TypeVar("T")

LOAD_WARNING = (
    "Failed to load plugins, attempt to fix the Config manifest and rerun the command. Continuing..."
)


class EditState(Enum):
    """Stages of a single edit."""

    DISCOVERING = "discovering"
    RESOLVING_PLUGINS = "resolving_plugins"
    BUILDING_MODULES = "building_modules"
    ASSEMBLING = "assembling"
    DELEGATING = "delegating"
    DONE = "done"
    FAILED = "failed"


@dataclass
class EditSession:
    """Per-edit progress. Never shared between edits."""

    editing_path: Path
    state: EditState = EditState.DISCOVERING
    warnings: list[EditWarning] = field(default_factory=list)

    def advance(self, state: EditState) -> None:
        logger.debug("Edit of %s: %s -> %s", self.editing_path, self.state.value, state.value)
        self.state = state


class ProjectEditor:
    """Generates editable workspaces for manifest directories."""

    def __init__(
        self,
        generator: DescriptorGenerating | None = None,
        mapper: GraphMapping | None = None,
        resource_locator: ResourceLocating | None = None,
        manifest_files_locator: ManifestFilesLocating | None = None,
        helpers_directory_locator: DirectoryLocating | None = None,
        templates_directory_locator: DirectoryLocating | None = None,
        writer: WorkspaceWriting | None = None,
        config_loader: ConfigLoading | None = None,
        plugin_service: PluginServicing | None = None,
        helpers_builder: HelpersBuilding | None = None,
        diagnostics: DiagnosticsSink | None = None,
        workspace_name: str = MANIFESTS_TARGET,
    ) -> None:
        self.generator = generator or DescriptorGenerator()
        self.mapper = mapper or ProjectEditorMapper()
        self.resource_locator = resource_locator or ResourceLocator()
        self.manifest_files_locator = manifest_files_locator or ManifestFilesLocator()
        self.helpers_directory_locator = helpers_directory_locator or HelpersDirectoryLocator()
        self.templates_directory_locator = (
            templates_directory_locator or TemplatesDirectoryLocator()
        )
        self.writer = writer or WorkspaceWriter()
        self.config_loader = config_loader or ConfigLoader(self.manifest_files_locator)
        self.plugin_service = plugin_service or PluginService()
        self.helpers_builder = helpers_builder
        self.diagnostics = diagnostics or LoggingDiagnostics()
        self.workspace_name = workspace_name

        self.resolver = PluginResolver()
        self.module_builder = HelperModuleBuilder()
        self.assembler = GraphAssembler()

    def edit(self, editing_path: Path, destination: Path) -> Path:
        """Generate a workspace to edit the manifests in ``editing_path``.

        Args:
            editing_path: Directory whose manifests will be edited
            destination: Directory in which the workspace is generated

        Returns:
            Path to the generated workspace file

        Raises:
            NoEditableFilesError: If the directory has nothing to edit
        """
        return self.run(editing_path, destination).workspace_path

    def run(self, editing_path: Path, destination: Path) -> EditReport:
        """Like :meth:`edit`, also returning the assembled graph and warnings."""
        session = EditSession(editing_path=editing_path)
        try:
            return self._run(session, destination)
        except Exception:
            session.advance(EditState.FAILED)
            raise

    def _run(self, session: EditSession, destination: Path) -> EditReport:
        editing_path = session.editing_path
        locator = self.manifest_files_locator

        library_path = self.resource_locator.library_path()
        tool_path = self.resource_locator.tool_path()
        project_manifests = locator.locate_project_manifests(editing_path)
        config_path = locator.locate_config(editing_path)
        dependencies_path = locator.locate_dependencies(editing_path)
        setup_path = locator.locate_setup(editing_path)
        plugin_manifests = locator.locate_plugin_manifests(editing_path)

        helpers = glob_sources(self.helpers_directory_locator.locate(editing_path), HELPER_PATTERNS)
        templates = glob_sources(
            self.templates_directory_locator.locate(editing_path), TEMPLATE_PATTERNS
        )

        loaded = self._record(session, self._load_plugins(editing_path))
        plugins = list(loaded.helper_plugins)

        session.advance(EditState.RESOLVING_PLUGINS)
        editable_plugins = self.resolver.resolve(plugin_manifests, plugins)

        session.advance(EditState.BUILDING_MODULES)
        helpers_builder = self.helpers_builder or HelpersBuilder(loaded.cache_directory)
        built_modules = self._record(
            session,
            self.module_builder.build(
                [entry.directory for entry in editable_plugins],
                plugins,
                lambda batch: helpers_builder.build_plugins(editing_path, batch),
            ),
        )

        session.advance(EditState.ASSEMBLING)
        graph = self.assembler.assemble(
            manifests=project_manifests,
            helpers=helpers,
            templates=templates,
            editable_plugins=editable_plugins,
            built_modules=built_modules,
            paths=PathMetadata(
                tool_path=tool_path,
                source_root=editing_path,
                destination=destination,
                library_path=library_path,
                config_path=config_path,
                dependencies_path=dependencies_path,
                setup_path=setup_path,
            ),
        )

        session.advance(EditState.DELEGATING)
        mapped = self.mapper.map(graph, name=self.workspace_name)
        descriptor = self.generator.generate_workspace(mapped)
        self.writer.write(descriptor)

        session.advance(EditState.DONE)
        return EditReport(
            workspace_path=descriptor.path,
            graph=graph,
            warnings=list(session.warnings),
        )

    def _load_plugins(self, path: Path) -> StepResult[PluginSet]:
        """Load the config and its plugins, degrading to no plugins on failure."""
        try:
            config = self.config_loader.load_config(path)
            plugins = self.plugin_service.load_plugins(config)
        except Exception as e:
            return StepResult(
                value=PluginSet.none(),
                warning=EditWarning(step="load-plugins", message=LOAD_WARNING, detail=str(e)),
            )
        return StepResult(value=plugins)

    def _record(self, session: EditSession, result: StepResult[T]) -> T:
        if result.warning is not None:
            session.warnings.append(result.warning)
            self.diagnostics.warn(result.warning)
        return result.value

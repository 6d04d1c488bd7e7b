"""Mapping a workspace graph to editable targets."""

from __future__ import annotations

from pathlib import Path

from edith.discovery.directories import HELPER_PATTERNS, HELPERS_DIRECTORY, glob_sources
from edith.generator.graph import Graph, Target
from edith.models import WorkspaceGraph

MANIFESTS_TARGET = "Manifests"
HELPERS_TARGET = "Helpers"
TEMPLATES_TARGET = "Templates"
CONFIG_TARGET = "Config"
DEPENDENCIES_TARGET = "Dependencies"
SETUP_TARGET = "Setup"


class ProjectEditorMapper:
    """Builds the target graph of an editable workspace.

    Targets are only created for sources that exist. Every target can import
    the edith library and the built plugin modules; the manifests target
    additionally depends on the helpers and on every plugin.
    """

    def map(self, workspace_graph: WorkspaceGraph, name: str = MANIFESTS_TARGET) -> Graph:
        paths = workspace_graph.paths
        built = workspace_graph.built_modules
        import_paths = [paths.library_path, *(module.path for module in built)]

        targets: list[Target] = []

        plugin_targets = []
        for plugin in workspace_graph.editable_plugins:
            helpers = glob_sources(_existing_dir(plugin.directory / HELPERS_DIRECTORY), HELPER_PATTERNS)
            plugin_targets.append(
                Target(
                    name=plugin.name,
                    sources=[plugin.manifest_path, *helpers],
                    import_paths=list(import_paths),
                    root=plugin.directory,
                )
            )

        helpers_target = None
        if workspace_graph.helpers:
            helpers_target = Target(
                name=HELPERS_TARGET,
                sources=list(workspace_graph.helpers),
                dependencies=[module.name for module in built],
                import_paths=list(import_paths),
            )
            targets.append(helpers_target)

        if workspace_graph.templates:
            targets.append(
                Target(
                    name=TEMPLATES_TARGET,
                    sources=list(workspace_graph.templates),
                    import_paths=list(import_paths),
                )
            )

        if workspace_graph.manifests:
            dependencies = [target.name for target in plugin_targets]
            dependencies += [module.name for module in built]
            if helpers_target:
                dependencies.insert(0, helpers_target.name)
            targets.append(
                Target(
                    name=MANIFESTS_TARGET,
                    sources=workspace_graph.manifest_paths,
                    dependencies=dependencies,
                    import_paths=list(import_paths),
                    root=paths.source_root,
                )
            )

        for target_name, path in (
            (CONFIG_TARGET, paths.config_path),
            (DEPENDENCIES_TARGET, paths.dependencies_path),
            (SETUP_TARGET, paths.setup_path),
        ):
            if path is not None:
                targets.append(Target(name=target_name, sources=[path], import_paths=list(import_paths)))

        targets.extend(plugin_targets)

        return Graph(
            name=name,
            source_root=paths.source_root,
            destination=paths.destination,
            tool_path=paths.tool_path,
            targets=targets,
        )


def _existing_dir(path: Path) -> Path | None:
    return path if path.is_dir() else None

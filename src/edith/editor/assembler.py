"""Assembly of the workspace graph."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from edith.errors import NoEditableFilesError
from edith.models import (
    BuiltPluginModule,
    EditablePluginEntry,
    ManifestReference,
    PathMetadata,
    WorkspaceGraph,
)


class GraphAssembler:
    """Merges discovery, resolution and build results into one graph."""

    def assemble(
        self,
        manifests: Sequence[ManifestReference],
        helpers: Sequence[Path],
        templates: Sequence[Path],
        editable_plugins: Sequence[EditablePluginEntry],
        built_modules: Sequence[BuiltPluginModule],
        paths: PathMetadata,
    ) -> WorkspaceGraph:
        """Assemble a workspace graph.

        Raises:
            NoEditableFilesError: If there are no manifests, editable plugins,
                helpers or templates. Built modules alone are not editable.
        """
        graph = WorkspaceGraph(
            manifests=tuple(manifests),
            helpers=tuple(helpers),
            templates=tuple(templates),
            editable_plugins=tuple(editable_plugins),
            built_modules=tuple(built_modules),
            paths=paths,
        )
        if not graph.is_editable:
            raise NoEditableFilesError(paths.source_root)
        return graph

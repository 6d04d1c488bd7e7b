"""Naming of plugins that are edited from source."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from pathlib import Path

from edith.models import EditablePluginEntry, PluginMetadata


def directory_key(path: Path) -> str:
    """Normalize a directory into a lookup key without touching the filesystem."""
    return os.path.normpath(os.fspath(path))


def index_by_directory(plugins: Iterable[PluginMetadata]) -> dict[str, PluginMetadata]:
    """Map each source directory to the first plugin loaded from it."""
    index: dict[str, PluginMetadata] = {}
    for plugin in plugins:
        index.setdefault(directory_key(plugin.source_directory), plugin)
    return index


class PluginResolver:
    """Reconciles editable plugin manifests with loaded plugin metadata."""

    def resolve(
        self,
        editable_manifest_paths: Sequence[Path],
        loaded_plugins: Sequence[PluginMetadata],
    ) -> list[EditablePluginEntry]:
        """Name every editable plugin manifest.

        A manifest living in the directory of a loaded plugin takes that
        plugin's declared name. Otherwise it is named after its directory.

        Args:
            editable_manifest_paths: Plugin manifests found in the editing directory
            loaded_plugins: Plugins reported by the plugin service, possibly empty

        Returns:
            One entry per manifest, in input order
        """
        loaded = index_by_directory(loaded_plugins)

        entries = []
        for manifest_path in editable_manifest_paths:
            plugin = loaded.get(directory_key(manifest_path.parent))
            name = plugin.name if plugin else manifest_path.parent.name
            entries.append(EditablePluginEntry(name=name, manifest_path=manifest_path))
        return entries

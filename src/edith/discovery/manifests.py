"""Locating manifest files in an editing directory."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from edith.models import ManifestKind, ManifestReference

EDITH_DIRECTORY = "Edith"
CONFIG_FILE = "Config.yaml"
DEPENDENCIES_FILE = "Dependencies.py"
SETUP_FILE = "Setup.py"
PLUGIN_FILE = "Plugin.yaml"

PROJECT_MANIFESTS = {
    "Project.py": ManifestKind.PROJECT,
    "Workspace.py": ManifestKind.WORKSPACE,
}

_SKIPPED_DIRECTORIES = {"__pycache__", "node_modules"}


def walk_files(directory: Path) -> Iterator[Path]:
    """Yield every file below ``directory``, skipping hidden and cache folders."""
    for root, dirnames, filenames in os.walk(directory):
        dirnames[:] = sorted(
            d for d in dirnames if not d.startswith(".") and d not in _SKIPPED_DIRECTORIES
        )
        for filename in sorted(filenames):
            yield Path(root) / filename


def find_upwards(directory: Path, relative: str | Path) -> Path | None:
    """Return ``directory/relative`` for the closest ancestor where it exists."""
    for candidate in (directory, *directory.parents):
        path = candidate / relative
        if path.exists():
            return path
    return None


class ManifestFilesLocator:
    """Finds project, config, dependencies, setup and plugin manifests."""

    def locate_project_manifests(self, directory: Path) -> list[ManifestReference]:
        manifests = [
            ManifestReference(kind=PROJECT_MANIFESTS[path.name], path=path)
            for path in walk_files(directory)
            if path.name in PROJECT_MANIFESTS
        ]
        return sorted(manifests, key=lambda m: m.path)

    def locate_config(self, directory: Path) -> Path | None:
        return find_upwards(directory, Path(EDITH_DIRECTORY) / CONFIG_FILE)

    def locate_dependencies(self, directory: Path) -> Path | None:
        config = self.locate_config(directory)
        if config is None:
            return None
        dependencies = config.parent / DEPENDENCIES_FILE
        return dependencies if dependencies.exists() else None

    def locate_setup(self, directory: Path) -> Path | None:
        setup = directory / SETUP_FILE
        return setup if setup.exists() else None

    def locate_plugin_manifests(self, directory: Path) -> list[Path]:
        return sorted(path for path in walk_files(directory) if path.name == PLUGIN_FILE)

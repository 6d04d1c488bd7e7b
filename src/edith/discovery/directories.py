"""Locating the helpers and templates directories."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from edith.discovery.manifests import EDITH_DIRECTORY, find_upwards

HELPERS_DIRECTORY = "Helpers"
TEMPLATES_DIRECTORY = "Templates"

HELPER_PATTERNS = ("**/*.py",)
TEMPLATE_PATTERNS = ("**/*.py", "**/*.j2")


class HelpersDirectoryLocator:
    """Finds ``Edith/Helpers`` in the editing directory or its ancestors."""

    def locate(self, directory: Path) -> Path | None:
        path = find_upwards(directory, Path(EDITH_DIRECTORY) / HELPERS_DIRECTORY)
        return path if path is not None and path.is_dir() else None


class TemplatesDirectoryLocator:
    """Finds ``Edith/Templates`` in the editing directory or its ancestors."""

    def locate(self, directory: Path) -> Path | None:
        path = find_upwards(directory, Path(EDITH_DIRECTORY) / TEMPLATES_DIRECTORY)
        return path if path is not None and path.is_dir() else None


def glob_sources(directory: Path | None, patterns: Iterable[str]) -> list[Path]:
    """List the files matching ``patterns`` under ``directory``.

    Results keep pattern order, each pattern's matches sorted, without
    duplicates. A missing directory yields no files.
    """
    if directory is None:
        return []

    seen: set[Path] = set()
    files = []
    for pattern in patterns:
        for path in sorted(directory.glob(pattern)):
            if path.is_file() and "__pycache__" not in path.parts and path not in seen:
                seen.add(path)
                files.append(path)
    return files

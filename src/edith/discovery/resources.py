"""Locating resources shipped with edith."""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

from edith.errors import ResourceNotFoundError


class ResourceLocator:
    """Finds the edith library and the executable that invoked the edit."""

    def __init__(self, package: str = "edith") -> None:
        self.package = package

    def library_path(self) -> Path:
        """Directory that manifests import edith from.

        Raises:
            ResourceNotFoundError: If the package cannot be found
        """
        spec = importlib.util.find_spec(self.package)
        if spec is None or not spec.submodule_search_locations:
            raise ResourceNotFoundError(f"Couldn't find the {self.package} library")
        return Path(next(iter(spec.submodule_search_locations))).parent

    def tool_path(self) -> Path:
        """The executable of this process, so the workspace runs the same edith."""
        return Path(sys.argv[0]).absolute()

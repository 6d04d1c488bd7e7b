"""Plugin manifest model."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from edith.errors import PluginLoadError


@dataclass
class PluginManifest:
    """Plugin metadata declared in ``Plugin.yaml``."""

    name: str
    version: str = "0.0.0"
    description: str = ""
    author: str = ""


def load_plugin_manifest(path: Path) -> PluginManifest:
    """Read a ``Plugin.yaml`` file.

    Raises:
        PluginLoadError: If the file is missing, unparsable or has no valid name
    """
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise PluginLoadError(f"Failed to read plugin manifest {path}: {e}") from e

    if not isinstance(data, dict) or not data.get("name"):
        raise PluginLoadError(f"Plugin manifest {path} must declare a 'name'")

    name = str(data["name"])
    if name in (".", "..") or "/" in name or "\\" in name:
        raise PluginLoadError(f"Plugin manifest {path} declares an invalid name '{name}'")

    return PluginManifest(
        name=name,
        version=str(data.get("version", "0.0.0")),
        description=data.get("description", ""),
        author=data.get("author", ""),
    )

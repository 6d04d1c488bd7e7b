"""Configuration loading and validation."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from edith.config.schema import EditorConfig
from edith.discovery.manifests import ManifestFilesLocator
from edith.errors import EditorError


class ConfigError(EditorError):
    """Configuration loading or validation error."""


def load_config_file(path: Path) -> EditorConfig:
    """Load and validate an edith config file.

    Relative local plugin paths are resolved against the directory that
    contains the ``Edith`` folder.

    Args:
        path: Path to ``Edith/Config.yaml``

    Returns:
        Validated configuration object

    Raises:
        ConfigError: If the file is unreadable or invalid
    """
    try:
        with open(path, "r") as f:
            config_data = yaml.safe_load(f)

        # Handle empty file
        if config_data is None:
            return EditorConfig()

        config = EditorConfig(**config_data)

    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed: {e}") from e
    except (OSError, TypeError) as e:
        raise ConfigError(f"Failed to load config from {path}: {e}") from e

    root = path.parent.parent
    for plugin in config.plugins:
        if plugin.path is not None and not Path(plugin.path).expanduser().is_absolute():
            plugin.path = str(root / plugin.path)
    return config


class ConfigLoader:
    """Loads the config that applies to an editing directory."""

    def __init__(self, manifest_files_locator: Optional[ManifestFilesLocator] = None) -> None:
        self.manifest_files_locator = manifest_files_locator or ManifestFilesLocator()

    def load_config(self, path: Path) -> EditorConfig:
        """Load the config for ``path``.

        Zero-config mode: if no config exists, all defaults are used.
        """
        config_path = self.manifest_files_locator.locate_config(path)
        if config_path is None:
            return EditorConfig()
        return load_config_file(config_path)

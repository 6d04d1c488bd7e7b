"""Loading the plugins declared in a config.

Plugins come from:
1. Local directories, given by ``path`` in the config
2. Git repositories, cloned into the cache directory at a tag or revision

Only plugins that ship a ``Helpers`` directory contribute helper code.
"""

from __future__ import annotations

import hashlib
import logging
import shutil
import subprocess
import tempfile
from pathlib import Path

from edith.config.schema import EditorConfig, PluginLocation
from edith.discovery.directories import HELPERS_DIRECTORY
from edith.discovery.manifests import PLUGIN_FILE
from edith.errors import PluginLoadError
from edith.models import PluginMetadata, PluginSet
from edith.plugins.manifest import load_plugin_manifest

logger = logging.getLogger(__name__)


class PluginService:
    """Resolves config plugin locations into loaded plugin metadata."""

    def __init__(self, git_timeout: int = 120) -> None:
        self.git_timeout = git_timeout

    def load_plugins(self, config: EditorConfig) -> PluginSet:
        """Load every plugin in ``config``.

        Raises:
            PluginLoadError: If any plugin can't be fetched or read
        """
        helper_plugins = []
        for location in config.plugins:
            directory = self._plugin_directory(location, config)
            manifest = load_plugin_manifest(directory / PLUGIN_FILE)

            if not (directory / HELPERS_DIRECTORY).is_dir():
                logger.debug("Plugin '%s' has no helpers, skipping", manifest.name)
                continue

            helper_plugins.append(PluginMetadata(name=manifest.name, source_directory=directory))
            logger.info("Loaded plugin '%s' from %s", manifest.name, directory)

        return PluginSet(helper_plugins=tuple(helper_plugins), cache_directory=config.cache_path)

    def _plugin_directory(self, location: PluginLocation, config: EditorConfig) -> Path:
        if location.is_local:
            path = Path(location.path).expanduser()
            directory = path.parent if path.name == PLUGIN_FILE else path
            if not directory.is_dir():
                raise PluginLoadError(f"Plugin directory {directory} doesn't exist")
            return directory
        return self._fetch_git_plugin(location, config.cache_path)

    def _fetch_git_plugin(self, location: PluginLocation, cache: Path) -> Path:
        """Clone a git plugin unless it is already in the cache.

        The clone happens in a staging directory next to the cache entry and
        only replaces the entry once the checkout holds a plugin manifest.
        """
        digest = hashlib.sha256(f"{location.git}@{location.ref}".encode()).hexdigest()[:16]
        directory = cache / "plugins" / digest
        if (directory / PLUGIN_FILE).exists():
            return directory

        directory.parent.mkdir(parents=True, exist_ok=True)
        staging = Path(tempfile.mkdtemp(prefix=f".{digest}-", dir=directory.parent))

        logger.info("Fetching plugin %s@%s", location.git, location.ref)
        try:
            self._clone(location, staging)
            if not (staging / PLUGIN_FILE).exists():
                raise PluginLoadError(
                    f"Plugin {location.git}@{location.ref} has no {PLUGIN_FILE} at its root"
                )
            # A directory without a manifest is a leftover from an interrupted fetch
            shutil.rmtree(directory, ignore_errors=True)
            try:
                staging.rename(directory)
            except OSError as e:
                raise PluginLoadError(f"Failed to cache plugin {location.git}: {e}") from e
        except Exception:
            shutil.rmtree(staging, ignore_errors=True)
            raise
        return directory

    def _clone(self, location: PluginLocation, target: Path) -> None:
        if location.tag:
            commands = [
                ["git", "clone", "--depth", "1", "--branch", location.tag, location.git, str(target)]
            ]
        else:
            commands = [
                ["git", "clone", "--no-checkout", location.git, str(target)],
                ["git", "-C", str(target), "checkout", "--quiet", location.revision],
            ]

        for command in commands:
            try:
                result = subprocess.run(
                    command,
                    capture_output=True,
                    text=True,
                    timeout=self.git_timeout,
                )
            except (OSError, subprocess.TimeoutExpired) as e:
                raise PluginLoadError(f"Failed to fetch plugin {location.git}: {e}") from e
            if result.returncode != 0:
                raise PluginLoadError(
                    f"Failed to fetch plugin {location.git}@{location.ref}: {result.stderr.strip()}"
                )

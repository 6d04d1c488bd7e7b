"""Byte-compiling plugin helpers into importable modules."""

from __future__ import annotations

import hashlib
import logging
import os
import py_compile
from pathlib import Path

from edith.discovery.directories import HELPER_PATTERNS, HELPERS_DIRECTORY, glob_sources
from edith.errors import HelpersBuildError
from edith.models import BuiltPluginModule, PluginMetadata

logger = logging.getLogger(__name__)

DEFAULT_CACHE_DIRECTORY = Path("~/.edith/cache")


class HelpersBuilder:
    """Compiles the helpers of a batch of plugins.

    Each plugin's ``Helpers/**/*.py`` is compiled to bytecode under
    ``<cache>/helpers/<root digest>/<source digest>/``, keeping the relative
    layout so the output directory can be put on an import path.
    """

    def __init__(self, cache_directory: Path | None = None) -> None:
        self.cache_directory = (cache_directory or DEFAULT_CACHE_DIRECTORY).expanduser()

    def build_plugins(self, root: Path, plugins: list[PluginMetadata]) -> list[BuiltPluginModule]:
        """Build every plugin in the batch.

        Raises:
            HelpersBuildError: On the first source that fails to compile
        """
        if not plugins:
            return []

        output = self.cache_directory / "helpers" / _digest(root)

        return [
            self._build_plugin(plugin, output / _digest(plugin.source_directory))
            for plugin in plugins
        ]

    def _build_plugin(self, plugin: PluginMetadata, output: Path) -> BuiltPluginModule:
        helpers = plugin.source_directory / HELPERS_DIRECTORY
        sources = glob_sources(helpers, HELPER_PATTERNS)

        for source in sources:
            compiled = (output / source.relative_to(helpers)).with_suffix(".pyc")
            try:
                py_compile.compile(str(source), cfile=str(compiled), doraise=True)
            except (py_compile.PyCompileError, OSError) as e:
                raise HelpersBuildError(f"Failed to build plugin '{plugin.name}': {e}") from e

        logger.info("Built plugin '%s' (%d sources)", plugin.name, len(sources))
        return BuiltPluginModule(name=plugin.name, path=output)


def _digest(path: Path) -> str:
    return hashlib.sha256(os.fspath(path).encode()).hexdigest()[:16]

"""Compilation of plugins that are not edited from source."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from edith.editor.resolver import directory_key
from edith.models import BuiltPluginModule, EditWarning, PluginMetadata, StepResult

BuildFunction = Callable[[list[PluginMetadata]], list[BuiltPluginModule]]

BUILD_WARNING = (
    "Failed to build plugins, attempt to fix the plugins and rerun the command. Continuing..."
)


class HelperModuleBuilder:
    """Builds helper modules for loaded plugins that have no editable manifest.

    A plugin is represented once in the workspace: either as editable source
    or as a built module. Plugins whose directory holds an editable manifest
    are therefore never handed to the build function.
    """

    def compile_only(
        self,
        editable_plugin_directories: Iterable[Path],
        loaded_plugins: Sequence[PluginMetadata],
    ) -> list[PluginMetadata]:
        """Loaded plugins that must be compiled, in their loaded order."""
        editable = {directory_key(directory) for directory in editable_plugin_directories}
        return [
            plugin
            for plugin in loaded_plugins
            if directory_key(plugin.source_directory) not in editable
        ]

    def build(
        self,
        editable_plugin_directories: Iterable[Path],
        loaded_plugins: Sequence[PluginMetadata],
        build_fn: BuildFunction,
    ) -> StepResult[list[BuiltPluginModule]]:
        """Build every compile-only plugin as one batch.

        Args:
            editable_plugin_directories: Directories of editable plugin manifests
            loaded_plugins: Plugins reported by the plugin service
            build_fn: Compiles a batch of plugins, raising on any failure

        Returns:
            StepResult holding the built modules. If the batch fails the value
            is an empty list and the result carries a warning.
        """
        plugins = self.compile_only(editable_plugin_directories, loaded_plugins)

        try:
            modules = list(build_fn(plugins))
        except Exception as e:
            return StepResult(
                value=[],
                warning=EditWarning(step="build-plugins", message=BUILD_WARNING, detail=str(e)),
            )

        return StepResult(value=modules)

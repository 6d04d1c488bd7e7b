"""Plugin system for edith.

Plugins share helper code between projects. A plugin inside the editing
directory is edited from source; every other plugin is compiled and added
to the workspace as a dependency.
"""

from edith.plugins.builder import HelpersBuilder
from edith.plugins.manifest import PluginManifest, load_plugin_manifest
from edith.plugins.service import PluginService

__all__ = [
    "HelpersBuilder",
    "PluginManifest",
    "PluginService",
    "load_plugin_manifest",
]

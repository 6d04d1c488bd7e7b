"""Tests for plugin manifest models."""

from pathlib import Path

import pytest

from edith.errors import PluginLoadError
from edith.plugins.manifest import PluginManifest, load_plugin_manifest


class TestPluginManifest:
    def test_defaults(self):
        m = PluginManifest(name="test-plugin")
        assert m.name == "test-plugin"
        assert m.version == "0.0.0"
        assert m.description == ""
        assert m.author == ""

    def test_load(self, tmp_path: Path, write_file):
        path = write_file(
            tmp_path / "Plugin.yaml",
            "name: LocalPlugin\nversion: 1.2.0\ndescription: Shared helpers\nauthor: someone\n",
        )

        m = load_plugin_manifest(path)

        assert m == PluginManifest(
            name="LocalPlugin",
            version="1.2.0",
            description="Shared helpers",
            author="someone",
        )

    def test_load_missing_file(self, tmp_path: Path):
        with pytest.raises(PluginLoadError):
            load_plugin_manifest(tmp_path / "Plugin.yaml")

    def test_load_without_name(self, tmp_path: Path, write_file):
        path = write_file(tmp_path / "Plugin.yaml", "version: 1.0.0\n")

        with pytest.raises(PluginLoadError, match="must declare a 'name'"):
            load_plugin_manifest(path)

    def test_load_invalid_yaml(self, tmp_path: Path, write_file):
        path = write_file(tmp_path / "Plugin.yaml", "name: [broken\n")

        with pytest.raises(PluginLoadError):
            load_plugin_manifest(path)

    @pytest.mark.parametrize("name", ["../../../escaped", "nested/name", "..", "back\\slash"])
    def test_load_rejects_path_like_names(self, tmp_path: Path, write_file, name):
        path = write_file(tmp_path / "Plugin.yaml", f"name: '{name}'\n")

        with pytest.raises(PluginLoadError, match="invalid name"):
            load_plugin_manifest(path)

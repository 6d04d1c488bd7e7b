"""Tests for manifest file discovery."""

from pathlib import Path

from edith.discovery.manifests import ManifestFilesLocator, find_upwards, walk_files
from edith.models import ManifestKind, ManifestReference


class TestManifestFilesLocator:
    def test_locate_project_manifests(self, tmp_path: Path, write_file):
        project = write_file(tmp_path / "App" / "Project.py")
        workspace = write_file(tmp_path / "Workspace.py")
        write_file(tmp_path / "App" / "Sources" / "main.py")

        manifests = ManifestFilesLocator().locate_project_manifests(tmp_path)

        assert manifests == [
            ManifestReference(kind=ManifestKind.PROJECT, path=project),
            ManifestReference(kind=ManifestKind.WORKSPACE, path=workspace),
        ]

    def test_hidden_and_cache_directories_skipped(self, tmp_path: Path, write_file):
        write_file(tmp_path / ".build" / "Project.py")
        write_file(tmp_path / "__pycache__" / "Project.py")

        assert ManifestFilesLocator().locate_project_manifests(tmp_path) == []

    def test_locate_plugin_manifests_sorted(self, tmp_path: Path, write_file):
        b = write_file(tmp_path / "Plugins" / "B" / "Plugin.yaml", "name: B")
        a = write_file(tmp_path / "Plugins" / "A" / "Plugin.yaml", "name: A")

        assert ManifestFilesLocator().locate_plugin_manifests(tmp_path) == [a, b]

    def test_locate_config_in_ancestor(self, tmp_path: Path, write_file):
        config = write_file(tmp_path / "Edith" / "Config.yaml")
        nested = tmp_path / "App"
        nested.mkdir()

        assert ManifestFilesLocator().locate_config(nested) == config

    def test_locate_config_missing(self, tmp_path: Path):
        assert ManifestFilesLocator().locate_config(tmp_path) is None

    def test_locate_dependencies_next_to_config(self, tmp_path: Path, write_file):
        write_file(tmp_path / "Edith" / "Config.yaml")
        dependencies = write_file(tmp_path / "Edith" / "Dependencies.py")

        assert ManifestFilesLocator().locate_dependencies(tmp_path) == dependencies

    def test_locate_dependencies_without_config(self, tmp_path: Path, write_file):
        write_file(tmp_path / "Edith" / "Dependencies.py")

        assert ManifestFilesLocator().locate_dependencies(tmp_path) is None

    def test_locate_setup(self, tmp_path: Path, write_file):
        locator = ManifestFilesLocator()
        assert locator.locate_setup(tmp_path) is None

        setup = write_file(tmp_path / "Setup.py")
        assert locator.locate_setup(tmp_path) == setup


def test_walk_files_sorted(tmp_path: Path, write_file):
    write_file(tmp_path / "b.txt")
    write_file(tmp_path / "a" / "c.txt")
    write_file(tmp_path / "a.txt")

    assert [p.relative_to(tmp_path).as_posix() for p in walk_files(tmp_path)] == [
        "a.txt",
        "b.txt",
        "a/c.txt",
    ]


def test_find_upwards(tmp_path: Path, write_file):
    marker = write_file(tmp_path / "marker")
    nested = tmp_path / "x" / "y"
    nested.mkdir(parents=True)

    assert find_upwards(nested, "marker") == marker
    assert find_upwards(nested, "nothing-here-" + tmp_path.name) is None

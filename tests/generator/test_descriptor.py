"""Tests for workspace descriptor generation and writing."""

import json
from pathlib import Path

from edith.generator.descriptor import DescriptorGenerator
from edith.generator.graph import Graph, Target, WorkspaceDescriptor
from edith.generator.writer import WorkspaceWriter


def _graph(tmp_path: Path, targets) -> Graph:
    return Graph(
        name="Manifests",
        source_root=tmp_path,
        destination=tmp_path / "out",
        tool_path=Path("/usr/local/bin/edith"),
        targets=targets,
    )


class TestDescriptorGenerator:
    def test_generate_workspace(self, tmp_path: Path):
        graph = _graph(
            tmp_path,
            [
                Target(
                    name="Manifests",
                    sources=[tmp_path / "Project.py"],
                    dependencies=["Local"],
                    import_paths=[Path("/lib"), Path("/cache/Remote")],
                    root=tmp_path,
                ),
                Target(
                    name="Local",
                    sources=[tmp_path / "Local" / "Plugin.yaml"],
                    import_paths=[Path("/lib")],
                    root=tmp_path / "Local",
                ),
            ],
        )

        descriptor = DescriptorGenerator().generate_workspace(graph)

        assert descriptor.path == tmp_path / "out" / "Manifests.code-workspace"
        assert descriptor.content["folders"] == [
            {"name": "Manifests", "path": str(tmp_path)},
            {"name": "Local", "path": str(tmp_path / "Local")},
        ]
        assert descriptor.content["settings"]["python.analysis.extraPaths"] == [
            "/lib",
            "/cache/Remote",
        ]
        edith = descriptor.content["edith"]
        assert edith["tool"] == "/usr/local/bin/edith"
        assert edith["targets"][0] == {
            "name": "Manifests",
            "sources": [str(tmp_path / "Project.py")],
            "dependencies": ["Local"],
        }

    def test_falls_back_to_source_root_folder(self, tmp_path: Path):
        graph = _graph(tmp_path, [Target(name="Helpers", sources=[tmp_path / "a.py"])])

        descriptor = DescriptorGenerator().generate_workspace(graph)

        assert descriptor.content["folders"] == [{"name": "Manifests", "path": str(tmp_path)}]


class TestWorkspaceWriter:
    def test_write(self, tmp_path: Path):
        descriptor = WorkspaceDescriptor(
            path=tmp_path / "nested" / "Manifests.code-workspace",
            content={"folders": [{"path": "/repo"}]},
        )

        path = WorkspaceWriter().write(descriptor)

        assert path == descriptor.path
        assert json.loads(path.read_text()) == {"folders": [{"path": "/repo"}]}

    def test_write_replaces_existing(self, tmp_path: Path):
        path = tmp_path / "Manifests.code-workspace"
        path.write_text("stale")

        WorkspaceWriter().write(WorkspaceDescriptor(path=path, content={}))

        assert json.loads(path.read_text()) == {}

"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from edith.models import PathMetadata


@pytest.fixture
def path_metadata(tmp_path: Path) -> PathMetadata:
    """Provide path metadata rooted at a temporary directory."""
    return PathMetadata(
        tool_path=Path("/usr/local/bin/edith"),
        source_root=tmp_path,
        destination=tmp_path / "out",
        library_path=Path("/site-packages"),
    )


@pytest.fixture
def write_file():
    """Create a file, including its parent directories."""

    def _write(path: Path, content: str = "") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write

"""Tests for helpers and templates directory discovery."""

from pathlib import Path

from edith.discovery.directories import (
    TEMPLATE_PATTERNS,
    HelpersDirectoryLocator,
    TemplatesDirectoryLocator,
    glob_sources,
)


def test_helpers_directory_found_in_ancestor(tmp_path: Path):
    helpers = tmp_path / "Edith" / "Helpers"
    helpers.mkdir(parents=True)
    nested = tmp_path / "App"
    nested.mkdir()

    assert HelpersDirectoryLocator().locate(nested) == helpers


def test_helpers_directory_missing(tmp_path: Path):
    assert HelpersDirectoryLocator().locate(tmp_path) is None


def test_helpers_file_is_not_a_directory(tmp_path: Path, write_file):
    write_file(tmp_path / "Edith" / "Helpers")
    assert HelpersDirectoryLocator().locate(tmp_path) is None


def test_templates_directory(tmp_path: Path):
    templates = tmp_path / "Edith" / "Templates"
    templates.mkdir(parents=True)

    assert TemplatesDirectoryLocator().locate(tmp_path) == templates


def test_glob_sources(tmp_path: Path, write_file):
    write_file(tmp_path / "feature" / "Template.j2")
    py = write_file(tmp_path / "feature" / "template.py")
    j2 = tmp_path / "feature" / "Template.j2"
    write_file(tmp_path / "README.md")
    write_file(tmp_path / "__pycache__" / "cached.py")

    assert glob_sources(tmp_path, TEMPLATE_PATTERNS) == [py, j2]


def test_glob_sources_without_directory():
    assert glob_sources(None, TEMPLATE_PATTERNS) == []


def test_glob_sources_deduplicates(tmp_path: Path, write_file):
    a = write_file(tmp_path / "a.py")

    assert glob_sources(tmp_path, ("**/*.py", "*.py")) == [a]

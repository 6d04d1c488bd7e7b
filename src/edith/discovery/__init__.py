"""Locating the files an editable workspace is made of."""

from edith.discovery.directories import (
    HelpersDirectoryLocator,
    TemplatesDirectoryLocator,
    glob_sources,
)
from edith.discovery.manifests import ManifestFilesLocator
from edith.discovery.resources import ResourceLocator

__all__ = [
    "HelpersDirectoryLocator",
    "ManifestFilesLocator",
    "ResourceLocator",
    "TemplatesDirectoryLocator",
    "glob_sources",
]

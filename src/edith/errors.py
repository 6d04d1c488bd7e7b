"""Errors raised while assembling an editable workspace."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorType(Enum):
    """How an error should be presented to the user."""

    ABORT = "abort"  # User-fixable, no stack trace needed
    BUG = "bug"  # Unexpected, worth reporting


class EditorError(Exception):
    """Base class for edith errors."""

    error_type: ErrorType = ErrorType.ABORT


class NoEditableFilesError(EditorError):
    """Raised when a directory has no manifests, plugins, helpers or templates."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory
        super().__init__(f"There are no editable files at {directory}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NoEditableFilesError):
            return NotImplemented
        return self.directory == other.directory

    def __hash__(self) -> int:
        return hash(self.directory)


class PluginLoadError(EditorError):
    """A plugin declared in the config could not be loaded."""


class HelpersBuildError(EditorError):
    """Plugin helper sources failed to compile."""


class ResourceNotFoundError(EditorError):
    """A resource shipped with edith could not be located."""

    error_type = ErrorType.BUG

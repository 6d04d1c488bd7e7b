"""Sinks that receive warnings from recovered edit steps."""

from __future__ import annotations

import logging
from typing import Protocol

from edith.models import EditWarning

logger = logging.getLogger(__name__)


class DiagnosticsSink(Protocol):
    """Receives warnings for steps that failed but did not stop the edit."""

    def warn(self, warning: EditWarning) -> None: ...


class LoggingDiagnostics:
    """Report warnings through the standard logging module."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logger

    def warn(self, warning: EditWarning) -> None:
        self.log.warning(warning.message)
        if warning.detail:
            self.log.debug("%s: %s", warning.step, warning.detail)


class CollectingDiagnostics:
    """Keep warnings in memory, e.g. for tests or for rendering later."""

    def __init__(self) -> None:
        self.warnings: list[EditWarning] = []

    def warn(self, warning: EditWarning) -> None:
        self.warnings.append(warning)

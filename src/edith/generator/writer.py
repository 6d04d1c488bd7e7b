"""Writing workspace descriptors to disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from edith.generator.graph import WorkspaceDescriptor

logger = logging.getLogger(__name__)


class WorkspaceWriter:
    def write(self, descriptor: WorkspaceDescriptor) -> Path:
        """Write ``descriptor`` as indented JSON, replacing any previous file."""
        descriptor.path.parent.mkdir(parents=True, exist_ok=True)
        with open(descriptor.path, "w") as f:
            json.dump(descriptor.content, f, indent=2)
            f.write("\n")
        logger.debug("Wrote workspace %s", descriptor.path)
        return descriptor.path

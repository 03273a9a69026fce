"""Filesystem existence checks used while resolving references."""

import logging
import os
from typing import Protocol

logger = logging.getLogger(__name__)


class PathProbe(Protocol):
    """Answers whether a candidate path exists."""

    def exists(self, path: str) -> bool:
        """Return True if the path exists."""
        ...


class FileSystemProbe:
    """Probe backed by a single stat call per candidate."""

    def exists(self, path: str) -> bool:
        """Return True if the path can be stat'ed, following symlinks."""
        try:
            os.stat(path)
        except (OSError, ValueError) as e:
            # Permission errors count as missing for this candidate.
            logger.debug("Probe failed for %s: %s", path, e)
            return False
        return True

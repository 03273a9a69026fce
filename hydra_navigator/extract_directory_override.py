"""Extraction rule for directory-override references."""

import re

from hydra_navigator.reference_candidate import ReferenceCandidate
from hydra_navigator.reference_kind import ReferenceKind

# Skips any leading marker such as 'override', then matches
# /path/to/dir: path/to/file
DIRECTORY_OVERRIDE_RE = re.compile(r"-\s*.*?(/[A-Za-z0-9_/-]+):\s+(.*)")


def extract_directory_override(line: str) -> ReferenceCandidate | None:
    """Extract (folder_name, relative_file_stem) from a defaults-list line."""
    m = DIRECTORY_OVERRIDE_RE.search(line)
    if not m:
        return None
    groups = (m.group(1), m.group(2))
    return ReferenceCandidate(ReferenceKind.DIRECTORY_OVERRIDE, groups)

"""Extraction rule for module-target references."""

import re

from hydra_navigator.reference_candidate import ReferenceCandidate
from hydra_navigator.reference_kind import ReferenceKind


def module_target_pattern(target_key: str = "_target_") -> re.Pattern[str]:
    """Compile the pattern matching `<target_key>: dotted.path`."""
    return re.compile(re.escape(target_key) + r":\s+([A-Za-z0-9_.]+)")


MODULE_TARGET_RE = module_target_pattern()


def extract_module_target(
    line: str, pattern: re.Pattern[str] = MODULE_TARGET_RE
) -> ReferenceCandidate | None:
    """Extract the dotted identifier following the target key."""
    m = pattern.search(line)
    if not m:
        return None
    return ReferenceCandidate(ReferenceKind.MODULE_TARGET, (m.group(1),))

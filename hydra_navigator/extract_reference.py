"""Classify a configuration line by trying each extraction rule in order."""

import re

from hydra_navigator.extract_directory_override import extract_directory_override
from hydra_navigator.extract_module_target import (
    MODULE_TARGET_RE,
    extract_module_target,
)
from hydra_navigator.reference_candidate import ReferenceCandidate


def extract_reference(
    line: str, target_pattern: re.Pattern[str] = MODULE_TARGET_RE
) -> ReferenceCandidate | None:
    """Return the first applicable reference on the line, or None."""
    # Directory overrides take priority over module targets.
    candidate = extract_directory_override(line)
    if candidate is None:
        candidate = extract_module_target(line, target_pattern)
    return candidate

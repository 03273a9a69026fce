"""Utility for deriving the relative file of a module-target reference."""

import os

from hydra_navigator.reference_candidate import ReferenceCandidate


def module_file_path(candidate: ReferenceCandidate, extension: str = ".py") -> str:
    """Map a dotted target to a module file, dropping the final symbol name."""
    # pkg.sub.MyClass -> pkg/sub.py
    # A bare symbol such as MyClass leaves an empty module path: ".py".
    dotted = candidate.raw_groups[0]
    return os.sep.join(dotted.split(".")[:-1]) + extension

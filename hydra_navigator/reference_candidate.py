"""Data model for a reference extracted from a single line."""

from dataclasses import dataclass

from hydra_navigator.reference_kind import ReferenceKind


@dataclass(frozen=True)
class ReferenceCandidate:
    """Represents the symbolic components matched on a line."""

    kind: ReferenceKind
    raw_groups: tuple[str, ...]  # regex groups in match order

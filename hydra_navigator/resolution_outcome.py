"""Data models for the outcome of resolving a reference line."""

from dataclasses import dataclass

from hydra_navigator.reference_kind import ReferenceKind


@dataclass(frozen=True)
class ResolvedLocation:
    """Represents the first existing file matching a reference."""

    absolute_path: str
    kind: ReferenceKind


@dataclass(frozen=True)
class ResolutionFailure:
    """Represents a matched reference for which no candidate file exists."""

    kind: ReferenceKind
    attempted_paths: tuple[str, ...]


@dataclass(frozen=True)
class Inapplicable:
    """Marks a line that matches neither reference pattern."""


INAPPLICABLE = Inapplicable()

ResolutionOutcome = ResolvedLocation | ResolutionFailure | Inapplicable

"""Data models for candidate base directories."""

from dataclasses import dataclass
from enum import Enum


class RootProvenance(Enum):
    """Where a search root came from."""

    WORKSPACE = "workspace"
    ENVIRONMENT_OVERRIDE = "environment_override"


@dataclass(frozen=True)
class SearchRoot:
    """A base directory probed for referenced files."""

    path: str
    provenance: RootProvenance

"""Data model for a jump-to-definition target."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DefinitionLocation:
    """A file position the editor should open."""

    path: str
    line: int = 0
    character: int = 0

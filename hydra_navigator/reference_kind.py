"""Kinds of symbolic references found in configuration lines."""

from enum import Enum


class ReferenceKind(Enum):
    """Identifies which extraction rule produced a reference."""

    DIRECTORY_OVERRIDE = "directory_override"
    MODULE_TARGET = "module_target"

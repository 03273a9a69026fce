"""Hover text for directory-override references."""

from hydra_navigator.extract_directory_override import extract_directory_override
from hydra_navigator.reference_resolver import ReferenceResolver
from hydra_navigator.resolution_outcome import ResolvedLocation


def provide_hover(resolver: ReferenceResolver, line: str) -> str | None:
    """Return the resolved config file path as hover text.

    Module targets get no hover; the line is checked first so that hovering
    over one never reports a resolution error.
    """
    if extract_directory_override(line) is None:
        return None
    outcome = resolver.resolve(line)
    if isinstance(outcome, ResolvedLocation):
        return f"File path: {outcome.absolute_path}"
    return None

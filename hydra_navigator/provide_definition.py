"""Jump-to-definition support for configuration lines."""

from hydra_navigator.definition_location import DefinitionLocation
from hydra_navigator.reference_resolver import ReferenceResolver
from hydra_navigator.resolution_outcome import ResolvedLocation


def provide_definition(
    resolver: ReferenceResolver, line: str
) -> DefinitionLocation | None:
    """Return the start of the referenced file, or None."""
    outcome = resolver.resolve(line)
    if isinstance(outcome, ResolvedLocation):
        return DefinitionLocation(outcome.absolute_path)
    return None

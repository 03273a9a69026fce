"""Utility for deriving the relative file of a directory-override reference."""

from hydra_navigator.reference_candidate import ReferenceCandidate


def override_file_path(
    candidate: ReferenceCandidate, extension: str = ".yaml"
) -> tuple[str, str]:
    """Return (folder_name, file_path) for a directory-override candidate."""
    folder_name, stem = candidate.raw_groups
    # /foo/bar: baz/qux -> ("/foo/bar", "baz/qux.yaml")
    return folder_name, stem + extension

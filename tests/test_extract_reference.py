"""Tests for reference extraction from single configuration lines."""

import os

import pytest

from hydra_navigator.extract_directory_override import extract_directory_override
from hydra_navigator.extract_module_target import (
    extract_module_target,
    module_target_pattern,
)
from hydra_navigator.extract_reference import extract_reference
from hydra_navigator.module_file_path import module_file_path
from hydra_navigator.override_file_path import override_file_path
from hydra_navigator.reference_kind import ReferenceKind


def test_directory_override_groups() -> None:
    """Verify folder name and file stem are extracted from an override line."""
    candidate = extract_directory_override("  - override /db/postgres: local")
    assert candidate is not None
    assert candidate.kind is ReferenceKind.DIRECTORY_OVERRIDE
    assert candidate.raw_groups == ("/db/postgres", "local")


def test_directory_override_without_marker() -> None:
    """Verify a plain defaults entry with an absolute-style group matches."""
    candidate = extract_directory_override("- /hydra/launcher: joblib")
    assert candidate is not None
    assert candidate.raw_groups == ("/hydra/launcher", "joblib")


@pytest.mark.parametrize(
    "line",
    [
        "db: postgres",
        "- db: postgres",
        "- override /db:postgres",
        "_target_: pkg.Model",
        "",
    ],
)
def test_directory_override_inapplicable(line: str) -> None:
    """Verify lines without the override shape are not matched."""
    assert extract_directory_override(line) is None


def test_override_file_path_appends_extension() -> None:
    """Verify the file stem gets the yaml extension."""
    candidate = extract_directory_override("- override: /foo/bar: baz/qux")
    assert candidate is not None
    assert override_file_path(candidate) == ("/foo/bar", "baz/qux.yaml")


def test_module_target_groups() -> None:
    """Verify the dotted identifier after _target_ is extracted."""
    candidate = extract_module_target("  _target_: pkg.sub.MyClass  # comment")
    assert candidate is not None
    assert candidate.kind is ReferenceKind.MODULE_TARGET
    assert candidate.raw_groups == ("pkg.sub.MyClass",)


def test_module_target_requires_whitespace() -> None:
    """Verify the key must be followed by whitespace."""
    assert extract_module_target("_target_:pkg.MyClass") is None


def test_module_file_path_drops_final_segment() -> None:
    """Verify the class name is dropped and segments become directories."""
    candidate = extract_module_target("_target_: pkg.sub.MyClass")
    assert candidate is not None
    assert module_file_path(candidate) == os.path.join("pkg", "sub") + ".py"


def test_module_file_path_single_segment() -> None:
    """Verify a bare symbol leaves an empty module path before the extension."""
    candidate = extract_module_target("_target_: MyClass")
    assert candidate is not None
    assert module_file_path(candidate) == ".py"


def test_custom_target_key() -> None:
    """Verify the target key can be configured."""
    pattern = module_target_pattern("_partial_target_")
    candidate = extract_module_target("_partial_target_: a.b.C", pattern)
    assert candidate is not None
    assert candidate.raw_groups == ("a.b.C",)
    assert extract_module_target("_target_: a.b.C", pattern) is None


def test_extract_reference_prefers_directory_override() -> None:
    """Verify the directory-override rule wins when both could apply."""
    candidate = extract_reference("- _target_: /a/b: c")
    assert candidate is not None
    assert candidate.kind is ReferenceKind.DIRECTORY_OVERRIDE


def test_extract_reference_falls_back_to_module_target() -> None:
    """Verify module targets are found when no override matches."""
    candidate = extract_reference("_target_: torch.optim.Adam")
    assert candidate is not None
    assert candidate.kind is ReferenceKind.MODULE_TARGET


def test_extract_reference_inapplicable() -> None:
    """Verify ordinary lines produce no reference."""
    assert extract_reference("lr: 0.001") is None

"""Resolve reference lines to files under ordered search roots."""

import logging
import os
from collections.abc import Callable, Mapping

from hydra_navigator.build_module_roots import build_module_roots
from hydra_navigator.build_override_roots import build_override_roots
from hydra_navigator.extract_module_target import module_target_pattern
from hydra_navigator.extract_reference import extract_reference
from hydra_navigator.join_path import join_path
from hydra_navigator.module_file_path import module_file_path
from hydra_navigator.navigator_config import NavigatorConfig
from hydra_navigator.navigator_environment import (
    NavigatorEnvironment,
    load_navigator_environment,
    read_env_file,
)
from hydra_navigator.override_file_path import override_file_path
from hydra_navigator.path_probe import FileSystemProbe, PathProbe
from hydra_navigator.reference_candidate import ReferenceCandidate
from hydra_navigator.reference_kind import ReferenceKind
from hydra_navigator.resolution_outcome import (
    INAPPLICABLE,
    ResolutionFailure,
    ResolutionOutcome,
    ResolvedLocation,
)
from hydra_navigator.search_root import SearchRoot

logger = logging.getLogger(__name__)


def _log_error(message: str) -> None:
    logger.error("%s", message)


class ReferenceResolver:
    """Resolves one configuration line at a time against the workspace.

    Search roots are rebuilt on every call from the current variables, so
    changes to the environment or the workspace env file are picked up
    without restarting.
    """

    def __init__(
        self,
        workspace_root: str | None = None,
        *,
        config: NavigatorConfig | None = None,
        probe: PathProbe | None = None,
        variables: Mapping[str, str] | None = None,
        env_reader: Callable[[str], Mapping[str, str]] = read_env_file,
        report_error: Callable[[str], None] = _log_error,
    ) -> None:
        """Initialize the resolver.

        `variables` defaults to the live process environment. `report_error`
        receives the user-facing message when a module target cannot be found.
        """
        self.workspace_root = workspace_root or ""
        self.config = config or NavigatorConfig()
        self.probe = probe or FileSystemProbe()
        self.variables = variables
        self.env_reader = env_reader
        self.report_error = report_error
        self._target_pattern = module_target_pattern(self.config.target_key)

    def resolve(self, line: str) -> ResolutionOutcome:
        """Resolve a line to the first existing file it references."""
        candidate = extract_reference(line, self._target_pattern)
        if candidate is None:
            return INAPPLICABLE
        if candidate.kind is ReferenceKind.DIRECTORY_OVERRIDE:
            return self._resolve_directory_override(candidate)
        return self._resolve_module_target(candidate)

    def _resolve_directory_override(
        self, candidate: ReferenceCandidate
    ) -> ResolutionOutcome:
        folder_name, file_path = override_file_path(
            candidate, self.config.override_extension
        )
        env = NavigatorEnvironment(
            self.workspace_root,
            os.environ if self.variables is None else self.variables,
        )
        roots = build_override_roots(
            env, self.config.conf_dir, self.config.config_path_env
        )
        outcome = self._probe_roots(candidate.kind, roots, folder_name, file_path)
        if isinstance(outcome, ResolutionFailure):
            logger.debug(
                "No config file for %s in %s", file_path, outcome.attempted_paths
            )
        return outcome

    def _resolve_module_target(
        self, candidate: ReferenceCandidate
    ) -> ResolutionOutcome:
        file_path = module_file_path(candidate, self.config.module_extension)
        # Re-read the env file each time; it may supply the module path.
        env = load_navigator_environment(
            self.workspace_root,
            self.variables,
            self.config.env_file,
            reader=self.env_reader,
        )
        roots = build_module_roots(env, self.config.module_path_env)
        outcome = self._probe_roots(candidate.kind, roots, file_path)
        if isinstance(outcome, ResolutionFailure):
            self.report_error(
                "Could not resolve Python module path from either "
                + ", ".join(outcome.attempted_paths)
            )
        return outcome

    def _probe_roots(
        self, kind: ReferenceKind, roots: list[SearchRoot], *relative: str
    ) -> ResolutionOutcome:
        """Probe each root in order and stop at the first existing file."""
        attempted: list[str] = []
        for root in roots:
            full_path = join_path(root.path, *relative)
            attempted.append(full_path)
            if self.probe.exists(full_path):
                logger.debug(
                    "Resolved %s via %s root", full_path, root.provenance.value
                )
                return ResolvedLocation(full_path, kind)
            logger.debug("Not found: %s", full_path)
        return ResolutionFailure(kind, tuple(attempted))

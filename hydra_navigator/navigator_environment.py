"""Explicit environment state used to build search roots."""

import logging
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import dotenv_values, load_dotenv

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavigatorEnvironment:
    """Workspace root and the environment variables visible to a resolution."""

    workspace_root: str = ""  # empty when no workspace is open
    variables: Mapping[str, str] = field(default_factory=dict)

    def get(self, name: str) -> str | None:
        """Return a variable's value, treating an empty value as unset."""
        return self.variables.get(name) or None


def read_env_file(path: str) -> dict[str, str]:
    """Read key=value pairs from an env file, or nothing if it is absent."""
    if not os.path.isfile(path):
        return {}
    try:
        values = dotenv_values(path, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read env file %s: %s", path, e)
        return {}
    return {k: v for k, v in values.items() if v is not None}


def load_navigator_environment(
    workspace_root: str,
    variables: Mapping[str, str] | None = None,
    env_file: str = ".env",
    reader: Callable[[str], Mapping[str, str]] = read_env_file,
) -> NavigatorEnvironment:
    """Combine the workspace env file with the given variables.

    Variables already set take precedence over values from the file, so
    reading the same file again never changes the result.
    """
    base = os.environ if variables is None else variables
    merged = dict(reader(os.path.join(workspace_root, env_file)))
    merged.update(base)
    return NavigatorEnvironment(workspace_root, merged)


def activate(workspace_root: str, env_file: str = ".env") -> bool:
    """Load the workspace env file into the process environment.

    Existing process variables are left untouched. Returns whether the
    file was found.
    """
    path = Path(workspace_root, env_file)
    if not path.is_file():
        return False
    load_dotenv(path, override=False, encoding="utf-8")
    logger.info("Loaded environment from %s", path)
    return True

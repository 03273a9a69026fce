"""Search roots for module-target references."""

import os

from hydra_navigator.join_path import join_path
from hydra_navigator.navigator_environment import NavigatorEnvironment
from hydra_navigator.search_root import RootProvenance, SearchRoot


def build_module_roots(
    env: NavigatorEnvironment, module_path_env: str = "PYTHONPATH"
) -> list[SearchRoot]:
    """Return the workspace root, then the module path variable if set."""
    roots = [SearchRoot(env.workspace_root, RootProvenance.WORKSPACE)]
    env_python_path = env.get(module_path_env)
    if env_python_path:
        if not os.path.isabs(env_python_path):
            env_python_path = join_path(env.workspace_root, env_python_path)
        roots.append(SearchRoot(env_python_path, RootProvenance.ENVIRONMENT_OVERRIDE))
    return roots

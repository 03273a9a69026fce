"""Search roots for directory-override references."""

from hydra_navigator.join_path import join_path
from hydra_navigator.navigator_environment import NavigatorEnvironment
from hydra_navigator.search_root import RootProvenance, SearchRoot


def build_override_roots(
    env: NavigatorEnvironment,
    conf_dir: str = "conf",
    config_path_env: str = "HYDRA_CONFIG_PATH",
) -> list[SearchRoot]:
    """Return <workspace>/conf, then the config path variable if set."""
    default_root = join_path(env.workspace_root, conf_dir)
    roots = [SearchRoot(default_root, RootProvenance.WORKSPACE)]
    env_conf_path = env.get(config_path_env)
    if env_conf_path:
        # Used verbatim, never resolved against the workspace.
        roots.append(SearchRoot(env_conf_path, RootProvenance.ENVIRONMENT_OVERRIDE))
    return roots

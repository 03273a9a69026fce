"""Logic for loading and merging configuration files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from hydra_navigator.config_error import ConfigError
from hydra_navigator.deep_merge import deep_merge
from hydra_navigator.navigator_config import NavigatorConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "search": {
        "conf_dir": "conf",
        "config_path_env": "HYDRA_CONFIG_PATH",
        "module_path_env": "PYTHONPATH",
        "env_file": ".env",
    },
    "patterns": {
        "target_key": "_target_",
    },
    "extensions": {
        "directory_override": ".yaml",
        "module_target": ".py",
    },
}


def load_config(path: str | None = None) -> NavigatorConfig:
    """Load configuration from a YAML file and merge it with defaults."""
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except (OSError, yaml.YAMLError) as e:
                msg = f"Could not read configuration file {p}: {e}"
                raise ConfigError(msg) from e
            if not isinstance(user_config, dict):
                msg = f"Configuration file {p} must contain a mapping"
                raise ConfigError(msg)
            config = deep_merge(config, user_config)
        else:
            logger.warning("Configuration file %s not found, using defaults", p)
    return NavigatorConfig.from_mapping(config)

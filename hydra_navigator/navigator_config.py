"""Settings controlling how references are matched and searched."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from hydra_navigator.config_error import ConfigError

# section -> key -> attribute name
_FIELDS: dict[str, dict[str, str]] = {
    "search": {
        "conf_dir": "conf_dir",
        "config_path_env": "config_path_env",
        "module_path_env": "module_path_env",
        "env_file": "env_file",
    },
    "patterns": {"target_key": "target_key"},
    "extensions": {
        "directory_override": "override_extension",
        "module_target": "module_extension",
    },
}


@dataclass(frozen=True)
class NavigatorConfig:
    """Validated navigator settings."""

    conf_dir: str = "conf"
    config_path_env: str = "HYDRA_CONFIG_PATH"
    module_path_env: str = "PYTHONPATH"
    env_file: str = ".env"
    target_key: str = "_target_"
    override_extension: str = ".yaml"
    module_extension: str = ".py"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "NavigatorConfig":
        """Build settings from a merged configuration mapping."""
        values: dict[str, str] = {}
        for section, entries in data.items():
            fields = _FIELDS.get(section)
            if fields is None:
                msg = f"Unknown configuration section: {section}"
                raise ConfigError(msg)
            if not isinstance(entries, Mapping):
                msg = f"Section '{section}' must be a mapping"
                raise ConfigError(msg)
            for key, value in entries.items():
                if key not in fields:
                    msg = f"Unknown configuration key: {section}.{key}"
                    raise ConfigError(msg)
                if not isinstance(value, str) or not value:
                    msg = f"{section}.{key} must be a non-empty string"
                    raise ConfigError(msg)
                values[fields[key]] = value
        return cls(**values)

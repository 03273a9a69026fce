"""Logic for deep merging configuration dictionaries."""

from typing import Any

from hydra_navigator.config_error import ConfigError


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Mappings are merged recursively.
    - Scalars in 'update' replace those in 'base'.
    - A mapping may not be replaced by a scalar or the other way round.
    """
    result = base.copy()
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        elif isinstance(current, dict) or isinstance(value, dict):
            msg = f"Cannot merge {type(value).__name__} into section '{key}'"
            raise ConfigError(msg)
        else:
            result[key] = value
    return result

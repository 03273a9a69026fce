"""Error raised for invalid navigator configuration."""


class ConfigError(ValueError):
    """Raised when a configuration file cannot be loaded or validated."""

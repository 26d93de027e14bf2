"""Configuration error."""


class ConfigError(Exception):
    """Raised when the installer configuration cannot be loaded or is invalid."""

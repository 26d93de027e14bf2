"""Config API module."""

from .ConfigError import ConfigError
from .ExecutionMode import ExecutionMode
from .InstallerConfig import InstallerConfig
from .LogLevel import LogLevel

__all__ = ["ConfigError", "ExecutionMode", "InstallerConfig", "LogLevel"]

"""Installer error taxonomy."""

from .CommandFailedError import CommandFailedError
from .format_call_chain import format_call_chain
from .InstallerError import InstallerError
from .LockHeldError import LockHeldError
from .MissingDependencyError import MissingDependencyError
from .MissingSourceError import MissingSourceError
from .TrappedSignalError import TrappedSignalError
from .UsageError import UsageError

__all__ = [
    "CommandFailedError",
    "InstallerError",
    "LockHeldError",
    "MissingDependencyError",
    "MissingSourceError",
    "TrappedSignalError",
    "UsageError",
    "format_call_chain",
]

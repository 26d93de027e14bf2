"""Usage error."""

from .InstallerError import InstallerError


class UsageError(InstallerError):
    """A command-line option or required argument is invalid or missing."""

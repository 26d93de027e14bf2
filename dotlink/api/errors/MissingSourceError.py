"""Source path for a link or backup does not exist."""

from .InstallerError import InstallerError


class MissingSourceError(InstallerError):
    """The source of a symlink or backup is missing.

    Recoverable: the entry is skipped and the batch continues.
    """

    fatal = False

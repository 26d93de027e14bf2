from .InstallerError import InstallerError


class CommandFailedError(InstallerError):
    """An operation issued through the executor failed and failures were not passed."""

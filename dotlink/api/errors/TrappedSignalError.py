"""A termination signal interrupted the run."""

import signal

from .InstallerError import InstallerError


class TrappedSignalError(InstallerError):
    """Raised from the signal handler so cleanup runs before exiting."""

    def __init__(self, signum: int):
        self.signum = signum
        try:
            name = signal.Signals(signum).name
        except ValueError:
            name = str(signum)
        super().__init__(f"Trapped signal {name}. Exiting.")

"""Script lock contention."""

from pathlib import Path

from .InstallerError import InstallerError


class LockHeldError(InstallerError):
    """Another instance holds the script lock."""

    def __init__(self, lock_dir: Path):
        self.lock_dir = lock_dir
        super().__init__(
            f"Unable to acquire script lock: {lock_dir}. "
            "If you trust the script isn't running, delete the lock dir"
        )

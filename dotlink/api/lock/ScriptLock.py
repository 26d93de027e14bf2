"""Advisory lock preventing two installer runs at once."""

import shutil
from pathlib import Path
from typing import Literal

from ..errors.LockHeldError import LockHeldError
from ..report.Reporter import Reporter
from .get_lock_path import get_lock_path


class ScriptLock:
    """Directory-based lock; ``mkdir`` is atomic, so only one holder succeeds.

    Use as a context manager. The lock is released on every exit path,
    including exceptions raised by trapped signals.
    """

    def __init__(
        self,
        name: str,
        scope: Literal["user", "system"] = "user",
        tmp_dir: Path | None = None,
        *,
        reporter: Reporter | None = None,
    ):
        self.path = get_lock_path(name, scope, tmp_dir)
        self.reporter = reporter
        self.acquired = False

    def acquire(self) -> None:
        """Take the lock.

        Raises:
            LockHeldError: If the lock directory already exists
        """
        try:
            self.path.mkdir()
        except FileExistsError as e:
            raise LockHeldError(self.path) from e
        self.acquired = True
        if self.reporter is not None:
            self.reporter.debug(f"Acquired script lock: {self.path}")

    def release(self) -> None:
        if not self.acquired:
            return
        self.acquired = False
        try:
            shutil.rmtree(self.path)
        except OSError:
            if self.reporter is not None:
                self.reporter.warning(f"Script lock could not be removed. Try manually deleting '{self.path}'")
            return
        if self.reporter is not None:
            self.reporter.debug("Removing script lock")

    def __enter__(self) -> "ScriptLock":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()
        return False

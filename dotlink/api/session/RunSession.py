"""Everything a run sets up and must tear down."""

import shutil
from contextlib import ExitStack
from pathlib import Path

from ...constants import PROGRAM_NAME
from ..config.InstallerConfig import InstallerConfig
from ..lock.ScriptLock import ScriptLock
from ..report.Reporter import Reporter
from .make_temp_dir import make_temp_dir
from .trap_signals import trap_signals


class RunSession:
    """Signal traps, script lock and temp directory for one installer run.

    Entering sets up what ``config`` asks for; leaving releases all of it,
    in reverse order, whether the run finished, failed or was interrupted.
    """

    def __init__(
        self,
        config: InstallerConfig,
        reporter: Reporter,
        *,
        name: str = PROGRAM_NAME,
        tmp_dir: Path | None = None,
    ):
        self.config = config
        self.reporter = reporter
        self.name = name
        self.tmp_dir = tmp_dir
        self.lock: ScriptLock | None = None
        self.temp_dir: Path | None = None
        self._stack = ExitStack()

    def __enter__(self) -> "RunSession":
        with ExitStack() as stack:
            stack.enter_context(trap_signals())
            if self.config.use_lock:
                self.lock = stack.enter_context(
                    ScriptLock(self.name, self.config.lock_scope, self.tmp_dir, reporter=self.reporter)
                )
            if self.config.use_temp_dir:
                self.temp_dir = make_temp_dir(self.name, self.tmp_dir)
                self.reporter.debug(f"Temporary directory: {self.temp_dir}")
                stack.callback(self._remove_temp_dir)
            self._stack = stack.pop_all()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return self._stack.__exit__(exc_type, exc_val, exc_tb)

    def _remove_temp_dir(self) -> None:
        if self.temp_dir is None or not self.temp_dir.is_dir():
            return
        shutil.rmtree(self.temp_dir, ignore_errors=True)
        self.reporter.debug("Removing temp directory")
        self.temp_dir = None

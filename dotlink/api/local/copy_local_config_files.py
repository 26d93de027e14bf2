"""Seed machine-local config files into the home directory once."""

import os
from pathlib import Path

from ..execute import operations
from ..execute.Executor import Executor
from ..report.Reporter import Reporter


def copy_local_config_files(local_dir: Path, user_home: Path, executor: Executor, reporter: Reporter) -> int:
    """Copy each regular file in ``local_dir`` into ``user_home`` unless one is already there.

    These are copied rather than linked so they can be edited per machine
    without touching the repository. Returns the number of files copied
    (or that would be copied under dry-run).
    """
    if not local_dir.is_dir():
        reporter.debug(f"No local config directory at {local_dir}")
        return 0

    copied = 0
    for source in sorted(local_dir.iterdir()):
        if not source.is_file():
            continue
        target = user_home / source.name
        if os.path.lexists(target):
            reporter.info(f"File already exists in target: {source}")
            continue
        executor.execute(operations.copy_file(source, target), f"Copying file: {source}")
        copied += 1
    return copied

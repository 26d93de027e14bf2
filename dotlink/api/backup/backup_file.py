"""Preserve a file or symlink before it is overwritten."""

import os
from pathlib import Path

from ...constants import BACKUP_SUFFIX
from ..errors.MissingSourceError import MissingSourceError
from ..execute import operations
from ..execute.Executor import Executor
from ..filename.create_unique_filename import create_unique_filename
from .BackupPolicy import BackupPolicy


def _backup_name(name: str) -> str:
    """Dotfiles lose their leading dot inside a backup directory."""
    return name[1:] if name.startswith(".") and len(name) > 1 else name


def backup_file(path: Path, policy: BackupPolicy, executor: Executor) -> Path | None:
    """Copy or move ``path`` to a unique backup location.

    Suffix placement backs ``~/.gitconfig`` up to ``~/.gitconfig.bak``
    (``.bak.1``, ``.bak.2``, ... when taken). Directory placement backs it up
    to ``<directory>/gitconfig``, creating the directory when missing; a
    relative directory is resolved against ``path``'s parent.

    Args:
        path: Existing file, directory or symlink to preserve
        policy: Backup strategy and placement
        executor: Chokepoint for the copy/move (and mkdir)

    Returns:
        The backup path, or None when the policy disables backups

    Raises:
        MissingSourceError: If ``path`` does not exist (nothing to back up)
        CommandFailedError: If the copy or move fails
    """
    if not policy.enabled:
        return None

    if not os.path.lexists(path):
        executor.reporter.debug(f"Source '{path}' not found")
        raise MissingSourceError(f"Nothing to back up: '{path}' not found")

    if policy.directory is not None:
        backup_dir = Path(policy.directory).expanduser()
        if not backup_dir.is_absolute():
            backup_dir = path.parent / backup_dir
        if not backup_dir.is_dir():
            executor.execute(operations.mkdir(backup_dir), "Creating backup directory")
        destination = create_unique_filename(backup_dir / _backup_name(path.name))
    else:
        destination = create_unique_filename(path.with_name(path.name + BACKUP_SUFFIX))

    if policy.move:
        executor.execute(operations.move(path, destination), f"Moving '{path}' to '{destination}'")
    else:
        executor.execute(operations.copy(path, destination), f"Backing up '{path}' to '{destination}'")
    return destination

"""Factories for the mutations the installer performs."""

import os
import shutil
from pathlib import Path

from .Operation import Operation


def _quote(path: Path | str) -> str:
    return f'"{path}"'


def mkdir(path: Path) -> Operation:
    """``mkdir -p``."""
    return Operation(
        description=f"mkdir -p {_quote(path)}",
        action=lambda: path.mkdir(parents=True, exist_ok=True),
    )


def symlink(source: Path, destination: Path) -> Operation:
    """``ln -fs``: point ``destination`` at ``source``, replacing a file or link already there."""

    def _link() -> None:
        if destination.is_symlink() or destination.is_file():
            destination.unlink()
        os.symlink(source, destination)

    return Operation(description=f"ln -fs {_quote(source)} {_quote(destination)}", action=_link)


def copy(source: Path, destination: Path) -> Operation:
    """``cp -R``: directories recursively, symlinks as symlinks."""

    def _copy() -> None:
        if source.is_dir() and not source.is_symlink():
            shutil.copytree(source, destination, symlinks=True)
        else:
            shutil.copy2(source, destination, follow_symlinks=False)

    return Operation(description=f"cp -R {_quote(source)} {_quote(destination)}", action=_copy)


def copy_file(source: Path, destination: Path) -> Operation:
    """``cp`` for a single regular file."""
    return Operation(
        description=f"cp {_quote(source)} {_quote(destination)}",
        action=lambda: shutil.copy2(source, destination),
    )


def move(source: Path, destination: Path) -> Operation:
    """``mv``."""
    return Operation(
        description=f"mv {_quote(source)} {_quote(destination)}",
        action=lambda: shutil.move(str(source), str(destination)),
    )


def remove(path: Path, *, sudo: bool = False) -> Operation:
    """``rm -rf``, optionally escalated with ``sudo``. Missing paths are not an error."""
    if sudo:
        return Operation(description=f"sudo rm -rf {_quote(path)}", argv=("sudo", "rm", "-rf", str(path)))

    def _remove() -> None:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        elif os.path.lexists(path):
            path.unlink()

    return Operation(description=f"rm -rf {_quote(path)}", action=_remove)

"""Enumerate the dotfiles a repository provides."""

from collections.abc import Iterable
from pathlib import Path


def find_dotfiles(base_dir: Path, exclude: Iterable[str]) -> list[Path]:
    """Return the dot entries directly under ``base_dir``, sorted by name.

    Files, directories and symlinks all qualify; names listed in
    ``exclude`` (repository tooling such as ``.git``) are skipped.
    """
    excluded = set(exclude)
    return sorted(
        (entry for entry in base_dir.iterdir() if entry.name.startswith(".") and entry.name not in excluded),
        key=lambda entry: entry.name,
    )

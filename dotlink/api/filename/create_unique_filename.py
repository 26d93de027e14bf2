"""Find a path that does not collide with any existing filesystem entry."""

import os
from pathlib import Path

from ..config.normalize_path import normalize_path
from .split_extension import split_extension


def create_unique_filename(path: str | Path, separator: str = ".", *, internal_integer: bool = False) -> Path:
    """Return ``path`` itself if free, else the first free numbered variant.

    Args:
        path: Candidate path (``~`` is expanded, the result is absolute)
        separator: Placed between the name and the counter
        internal_integer: Put the counter before the extension
            (``file-1.txt``) instead of after the full name (``file.txt.1``)

    Dangling symlinks count as existing entries. The check is not atomic:
    another process can take the name between the check and its use.

    Examples:
        create_unique_filename("/some/dir/file.txt")              -> /some/dir/file.txt.1
        create_unique_filename("/some/dir/file.txt", "-", internal_integer=True)
                                                                  -> /some/dir/file-1.txt
    """
    candidate = normalize_path(path)
    if not os.path.lexists(candidate):
        return candidate

    base, extension = split_extension(candidate.name)
    number = 1
    while True:
        if internal_integer:
            name = f"{base}{separator}{number}{extension}"
        else:
            name = f"{base}{extension}{separator}{number}"
        numbered = candidate.with_name(name)
        if not os.path.lexists(numbered):
            return numbered
        number += 1

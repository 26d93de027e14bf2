"""Inspect a link destination without touching it."""

import os
from pathlib import Path

from .LinkState import LinkState


def classify_destination(source: Path, destination: Path) -> LinkState:
    """Classify what occupies ``destination`` relative to ``source``.

    A dangling symlink counts as ABSENT: ``ln -fs`` replaces it without a
    backup. Symlinks are compared by the fully resolved real path of both
    sides, so a link reached through a symlinked parent still matches.
    """
    if not os.path.lexists(destination):
        return LinkState.ABSENT
    if destination.is_symlink():
        if not destination.exists():
            return LinkState.ABSENT
        if os.path.realpath(destination) == os.path.realpath(source):
            return LinkState.SYMLINK_TO_SAME_SOURCE
        return LinkState.SYMLINK_TO_OTHER_SOURCE
    return LinkState.REGULAR_FILE_OR_DIR

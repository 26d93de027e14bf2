"""Fail early when an external executable is unavailable."""

import shutil

from ..errors.MissingDependencyError import MissingDependencyError


def require_tool(tool: str, hint: str = "") -> str:
    """Return the full path of ``tool`` on PATH.

    Raises:
        MissingDependencyError: If ``tool`` cannot be found
    """
    found = shutil.which(tool)
    if found is None:
        raise MissingDependencyError(tool, hint)
    return found

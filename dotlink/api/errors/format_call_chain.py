"""Render a call stack as a compact ``( func:file:line < ... )`` chain."""

import traceback
from pathlib import Path

# Frames from these modules are plumbing, not part of the caller's story.
_SKIPPED_MODULES = {"Reporter.py", "InstallerError.py", "format_call_chain.py"}


def format_call_chain(frames: traceback.StackSummary | None = None) -> str:
    """Format frames innermost-first as ``( func:file:line < func:file:line )``.

    Args:
        frames: Stack to format, outermost first (as returned by
            ``traceback.extract_stack``). Defaults to the current stack.

    Returns:
        The formatted chain, or an empty string when nothing is left after
        filtering.
    """
    if frames is None:
        frames = traceback.extract_stack()[:-1]

    entries = [
        f"{frame.name}:{Path(frame.filename).name}:{frame.lineno}"
        for frame in reversed(frames)
        if Path(frame.filename).name not in _SKIPPED_MODULES
    ]
    if not entries:
        return ""
    return "( " + " < ".join(entries) + " )"

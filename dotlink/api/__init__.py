"""API module for dotlink.

Each ``cmd_*`` function returns a StageResult; the CLI only displays it.
Everything else here is the installer machinery those commands drive.
"""

__all__ = []

"""Default log file location."""

from pathlib import Path

from ...constants import LOGS_DIRNAME, PROGRAM_NAME
from .get_home_dir import get_home_dir


def get_default_logfile(source_dir: Path) -> Path:
    """``~/logs/<repository dir name>-dotlink.log``."""
    return get_home_dir(LOGS_DIRNAME) / f"{source_dir.name}-{PROGRAM_NAME}.log"

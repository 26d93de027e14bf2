"""Where the script lock lives."""

import os
import tempfile
from pathlib import Path
from typing import Literal


def get_lock_path(name: str, scope: Literal["user", "system"] = "user", tmp_dir: Path | None = None) -> Path:
    """Lock directory for ``name``.

    User scope (``<tmp>/<name>.<uid>.lock``) lets different users run at the
    same time; system scope (``<tmp>/<name>.lock``) allows one run per host.
    """
    base = Path(tmp_dir) if tmp_dir is not None else Path(tempfile.gettempdir())
    if scope == "system":
        return base / f"{name}.lock"
    return base / f"{name}.{os.getuid()}.lock"

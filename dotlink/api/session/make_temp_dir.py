"""Private per-run temporary directory."""

import tempfile
from pathlib import Path


def make_temp_dir(name: str, tmp_dir: Path | None = None) -> Path:
    """Create ``<tmp>/<name>.<random>`` readable only by the current user (0700)."""
    return Path(tempfile.mkdtemp(prefix=f"{name}.", dir=tmp_dir))

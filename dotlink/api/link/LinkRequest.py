"""A source to expose at a destination."""

from dataclasses import dataclass
from pathlib import Path

from ..config.expand_home import expand_home
from ..errors.UsageError import UsageError


@dataclass(frozen=True)
class LinkRequest:
    """Link ``destination`` to ``source``; both absolute."""

    source: Path
    destination: Path

    @classmethod
    def build(cls, source: str | Path, destination: str | Path, home: Path) -> "LinkRequest":
        """Expand ``~`` in both paths against ``home``.

        Raises:
            UsageError: If either path is empty
        """
        if not str(source).strip():
            raise UsageError("Symlink source not specified")
        if not str(destination).strip():
            raise UsageError("Symlink destination not specified")
        return cls(source=expand_home(source, home), destination=expand_home(destination, home))

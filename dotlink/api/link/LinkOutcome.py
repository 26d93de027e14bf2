"""Result of one symlink request."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class LinkOutcome(Enum):
    LINKED = "linked"
    ALREADY_LINKED = "already_linked"
    RELINKED = "relinked"
    REPLACED = "replaced"
    FAILED = "failed"


@dataclass(frozen=True)
class LinkResult:
    """Outcome plus the backup taken on the way, if any."""

    outcome: LinkOutcome
    backup: Path | None = None

    @property
    def changed(self) -> bool:
        return self.outcome in (LinkOutcome.LINKED, LinkOutcome.RELINKED, LinkOutcome.REPLACED)

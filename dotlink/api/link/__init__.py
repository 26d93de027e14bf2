"""Link API module - the symlink state machine."""

from .LinkOutcome import LinkOutcome, LinkResult
from .LinkRequest import LinkRequest
from .LinkState import LinkState

__all__ = ["LinkOutcome", "LinkRequest", "LinkResult", "LinkState"]

"""A single filesystem mutation, described for reporting."""

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class Operation:
    """A mutation the Executor may run or, under dry-run, only describe.

    Exactly one of ``action`` (an in-process callable) or ``argv`` (an
    external command) is set. ``description`` is the shell-like rendering
    reported in dry-run and used as the default result message.
    """

    description: str
    action: Callable[[], object] | None = None
    argv: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if (self.action is None) == (self.argv is None):
            raise ValueError("Operation needs exactly one of action or argv")

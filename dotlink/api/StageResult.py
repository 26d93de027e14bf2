"""What an install command hands back to the CLI."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Announcement, work generator and outcome of one install command.

    ``progress_callback`` does the linking while yielding ``(fraction,
    message)`` pairs and must fill in ``result``, ``output`` and ``success``
    before it returns. A signal that lands while the caller is printing a
    progress line is thrown back into the generator at its ``yield``, so the
    command still releases its lock and reports the failure itself.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False

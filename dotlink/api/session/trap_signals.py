"""Turn termination signals into exceptions so cleanup still runs."""

import signal
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from ..errors.TrappedSignalError import TrappedSignalError

# SIGINT already raises KeyboardInterrupt.
TRAPPED_SIGNALS = (signal.SIGTERM, signal.SIGHUP, signal.SIGQUIT)


def _raise_trapped(signum, frame) -> None:
    raise TrappedSignalError(signum)


@contextmanager
def trap_signals() -> Iterator[None]:
    """Raise TrappedSignalError on SIGTERM, SIGHUP and SIGQUIT within the block.

    Signal handlers can only be installed from the main thread; elsewhere
    this is a no-op. Previous handlers are restored on exit.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    previous = {signum: signal.signal(signum, _raise_trapped) for signum in TRAPPED_SIGNALS}
    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)

"""Base class for installer failures."""

import traceback

from .format_call_chain import format_call_chain


class InstallerError(Exception):
    """Raised when an installer step cannot complete.

    Carries the call chain that led to the failure so it can be reported
    alongside the message. ``fatal`` errors end the run; the others only
    fail the entry being processed.
    """

    fatal = True

    def __init__(self, message: str, *, trace: str | None = None):
        super().__init__(message)
        self.message = message
        self.trace = trace if trace is not None else format_call_chain(traceback.extract_stack()[:-1])

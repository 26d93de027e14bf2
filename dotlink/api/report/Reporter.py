"""Severity-tagged messages to the screen and the log file."""

import logging
import sys
import traceback
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console

from ..config.ExecutionMode import ExecutionMode
from ..config.LogLevel import LogLevel
from ..errors.format_call_chain import format_call_chain
from .LogFileHandler import LogFileHandler
from .Severity import Severity

LOGFILE_LOGGER_NAME = "dotlink.logfile"

_LOGGING_LEVELS = {
    Severity.FATAL: logging.CRITICAL,
    Severity.ERROR: logging.ERROR,
    Severity.WARNING: logging.WARNING,
    Severity.DEBUG: logging.DEBUG,
}


class Reporter:
    """Single outlet for everything the installer tells the user.

    Screen output honors ``quiet`` (nothing) and ``verbose`` (debug lines);
    the log file honors the run's LogLevel independently of both. One
    Reporter owns the log file at a time; creating another replaces its
    handler.
    """

    def __init__(self, mode: ExecutionMode, *, console: Console | None = None):
        self.quiet = mode.quiet
        self.verbose = mode.verbose
        self.console = console or Console(file=sys.stdout, highlight=False)
        self._logger = logging.getLogger(LOGFILE_LOGGER_NAME)
        self._logger.propagate = False
        self._logger.setLevel(logging.DEBUG)
        self._drop_handlers()
        self._handler: LogFileHandler | None = None
        if mode.log_file is not None and mode.log_level is not LogLevel.OFF:
            self._handler = LogFileHandler(mode.log_file, mode.log_level)
            self._logger.addHandler(self._handler)

    def __enter__(self) -> "Reporter":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        """Flush and detach the log file handler."""
        if self._handler is not None:
            self._logger.removeHandler(self._handler)
            self._handler.close()
            self._handler = None

    def _drop_handlers(self) -> None:
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

    @contextmanager
    def verbosity(self, verbose: bool) -> Iterator[None]:
        """Force verbose output for the duration of the block, then restore it."""
        saved = self.verbose
        if verbose:
            self.verbose = True
        try:
            yield
        finally:
            self.verbose = saved

    def report(
        self,
        severity: Severity | str,
        message: str,
        location: str | None = None,
        *,
        trace: str | None = None,
    ) -> None:
        """Print and log one message.

        Args:
            severity: Kind of message
            message: Text to report
            location: Where the report originated, appended as ``(line: ...)``
            trace: Call chain for error-class messages; defaults to the
                current stack
        """
        severity = Severity(severity)
        parts = [message]
        if location:
            parts.append(f"(line: {location})")
        if severity.carries_trace:
            if trace is None:
                trace = format_call_chain(traceback.extract_stack()[:-1])
            parts.append(trace)
        text = " ".join(part for part in parts if part)

        self._write_to_screen(severity, text)
        self._write_to_log(severity, text)

    def _write_to_screen(self, severity: Severity, text: str) -> None:
        if self.quiet:
            return
        if severity is Severity.DEBUG and not self.verbose:
            return
        if severity is Severity.HEADER:
            line = text
        else:
            line = f"[{severity.value:>7}] {text}"
        self.console.print(line, style=severity.style, markup=False, highlight=False, soft_wrap=True)

    def _write_to_log(self, severity: Severity, text: str) -> None:
        if severity is Severity.INPUT or self._handler is None:
            return
        self._logger.log(_LOGGING_LEVELS.get(severity, logging.INFO), text, extra={"severity": severity.value})

    def echo(self, text: str) -> None:
        """Plain, unstyled line (not logged)."""
        if not self.quiet:
            self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def fatal(self, message: str, location: str | None = None, *, trace: str | None = None) -> None:
        self.report(Severity.FATAL, message, location, trace=trace)

    def error(self, message: str, location: str | None = None, *, trace: str | None = None) -> None:
        self.report(Severity.ERROR, message, location, trace=trace)

    def warning(self, message: str, location: str | None = None) -> None:
        self.report(Severity.WARNING, message, location)

    def notice(self, message: str, location: str | None = None) -> None:
        self.report(Severity.NOTICE, message, location)

    def info(self, message: str, location: str | None = None) -> None:
        self.report(Severity.INFO, message, location)

    def success(self, message: str, location: str | None = None) -> None:
        self.report(Severity.SUCCESS, message, location)

    def dryrun(self, message: str, location: str | None = None) -> None:
        self.report(Severity.DRYRUN, message, location)

    def debug(self, message: str, location: str | None = None) -> None:
        self.report(Severity.DEBUG, message, location)

    def header(self, message: str) -> None:
        self.report(Severity.HEADER, message)

    def input(self, message: str) -> None:
        self.report(Severity.INPUT, message)

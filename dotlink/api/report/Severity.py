"""Report severities and their screen styles."""

from enum import Enum


class Severity(str, Enum):
    """Kinds of report messages, from most to least serious."""

    FATAL = "fatal"
    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"
    SUCCESS = "success"
    INFO = "info"
    DRYRUN = "dryrun"
    DEBUG = "debug"
    HEADER = "header"
    INPUT = "input"

    @property
    def style(self) -> str:
        """Rich style used on the screen."""
        return _STYLES[self]

    @property
    def carries_trace(self) -> bool:
        """Error-class messages get the call chain appended."""
        return self in (Severity.FATAL, Severity.ERROR)


_STYLES: dict[Severity, str] = {
    Severity.FATAL: "bold red",
    Severity.ERROR: "bold red",
    Severity.WARNING: "red",
    Severity.NOTICE: "bold",
    Severity.SUCCESS: "green",
    Severity.INFO: "grey70",
    Severity.DRYRUN: "blue",
    Severity.DEBUG: "magenta",
    Severity.HEADER: "bold underline white",
    Severity.INPUT: "bold underline",
}

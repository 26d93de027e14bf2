"""Log file verbosity levels."""

from enum import Enum


class LogLevel(str, Enum):
    """Threshold deciding which report severities reach the log file."""

    FATAL = "FATAL"
    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"
    NOTICE = "NOTICE"
    DEBUG = "DEBUG"
    ALL = "ALL"
    OFF = "OFF"

    @classmethod
    def parse(cls, value: "str | LogLevel") -> "LogLevel":
        """Case-insensitive lookup. Unknown names fall back to ERROR."""
        if isinstance(value, LogLevel):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            return cls.ERROR

    def logged_severities(self) -> frozenset[str]:
        """Severity names written to the log file at this level.

        ``input`` is never logged, whatever the level.
        """
        return _LOGGED_SEVERITIES[self]


_EVERYTHING = frozenset(
    {"fatal", "error", "warning", "notice", "info", "success", "dryrun", "debug", "header"}
)

_LOGGED_SEVERITIES: dict[LogLevel, frozenset[str]] = {
    LogLevel.ALL: _EVERYTHING,
    LogLevel.DEBUG: _EVERYTHING,
    LogLevel.INFO: frozenset({"error", "fatal", "warning", "info", "notice", "success"}),
    LogLevel.NOTICE: frozenset({"error", "fatal", "warning", "notice", "success"}),
    LogLevel.WARN: frozenset({"error", "fatal", "warning"}),
    LogLevel.ERROR: frozenset({"error", "fatal"}),
    LogLevel.FATAL: frozenset({"fatal"}),
    LogLevel.OFF: frozenset(),
}

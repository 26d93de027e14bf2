"""Log file handler that writes plain, severity-filtered lines."""

import logging
import socket
from pathlib import Path

from ...constants import LOG_TIMESTAMP_FORMAT
from ..config.LogLevel import LogLevel
from .strip_ansi import strip_ansi


class _SeverityFilter(logging.Filter):
    """Pass only records whose severity the configured LogLevel logs."""

    def __init__(self, level: LogLevel):
        super().__init__()
        self.allowed = level.logged_severities()

    def filter(self, record: logging.LogRecord) -> bool:
        return getattr(record, "severity", "") in self.allowed


class _PlainFormatter(logging.Formatter):
    """``Oct 18 01:41:07 [  error] [host] message`` with color codes removed."""

    def __init__(self) -> None:
        super().__init__(fmt="%(asctime)s [%(severity)7s] [%(hostname)s] %(message)s", datefmt=LOG_TIMESTAMP_FORMAT)
        self.hostname = socket.gethostname()

    def format(self, record: logging.LogRecord) -> str:
        record.hostname = self.hostname
        record.msg = strip_ansi(str(record.msg))
        return super().format(record)


class LogFileHandler(logging.FileHandler):
    """Append-only file handler; the file and its parent directory are created on first write."""

    def __init__(self, log_file: Path, level: LogLevel):
        super().__init__(log_file, mode="a", encoding="utf-8", delay=True)
        self.addFilter(_SeverityFilter(level))
        self.setFormatter(_PlainFormatter())

    def _open(self):
        Path(self.baseFilename).parent.mkdir(parents=True, exist_ok=True)
        return super()._open()

"""Process-wide execution flags for one installer run."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .LogLevel import LogLevel
from .normalize_path import normalize_path


class ExecutionMode(BaseModel):
    """Flags fixed at startup and read-only for the rest of the run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    dry_run: bool = Field(False, description="Report intended actions without mutating anything")
    verbose: bool = Field(False, description="Show native output of executed commands and debug reports")
    quiet: bool = Field(False, description="Suppress screen output (the log file still honors log_level)")
    force: bool = Field(False, description="Implied 'yes' to interactive prompts")
    log_level: LogLevel = Field(LogLevel.ERROR, description="Severities written to the log file")
    log_file: Path | None = Field(None, description="Log file path; None selects the default location")

    @field_validator("log_level", mode="before")
    @classmethod
    def _parse_log_level(cls, v: object) -> LogLevel:
        return LogLevel.parse(v)  # type: ignore[arg-type]

    @field_validator("log_file")
    @classmethod
    def _normalize_log_file(cls, v: Path | None) -> Path | None:
        return normalize_path(v)

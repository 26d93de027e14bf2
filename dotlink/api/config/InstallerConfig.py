"""Top-level dotlink configuration."""

import json
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...constants import CONFIG_FILENAME, DEFAULT_LOCAL_DIRNAME
from ..backup.BackupPolicy import BackupPolicy
from ..discover.DEFAULT_EXCLUDES import DEFAULT_EXCLUDES
from .ConfigError import ConfigError
from .get_home_dir import get_home_dir
from .normalize_path import normalize_path


class InstallerConfig(BaseModel):
    """What to link, where to link it, and how to guard the run."""

    model_config = ConfigDict(extra="forbid")

    source_dir: Path = Field(default_factory=Path.cwd, description="Dotfiles repository root")
    user_home: Path = Field(default_factory=get_home_dir, description="Home directory to link into")
    exclude: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDES),
        description="Dot entries in the repository root that are never linked",
    )
    local_dir: str = Field(DEFAULT_LOCAL_DIRNAME, description="Repository subdirectory seeded into home once")
    lock_scope: Literal["user", "system"] = Field("user", description="Scope of the script lock")
    use_lock: bool = Field(True, description="Refuse to run while another instance holds the lock")
    use_temp_dir: bool = Field(False, description="Create a private temporary directory for the run")
    use_sudo: bool = Field(False, description="Remove replaced destinations with sudo")
    backup: BackupPolicy = Field(default_factory=BackupPolicy.copy_to_suffix)

    @field_validator("source_dir", "user_home")
    @classmethod
    def _normalize_paths(cls, v: Path) -> Path:
        return normalize_path(v)

    @property
    def local_path(self) -> Path:
        return self.source_dir / self.local_dir

    @classmethod
    def get_config_path(cls, source_dir: Path) -> Path:
        """Config file looked up in the repository root."""
        return normalize_path(source_dir) / CONFIG_FILENAME

    @classmethod
    def load(cls, path: Path | None = None, **overrides: Any) -> "InstallerConfig":
        """Load config from JSON and apply overrides.

        Overrides whose value is None are ignored, so unset CLI options keep
        the file's values. An explicit ``path`` must exist; without one the
        repository's ``dotlink.json`` is used when present and defaults
        otherwise.

        Raises:
            ConfigError: If an explicit file is missing, the JSON is invalid,
                or validation fails
        """
        raw: dict[str, Any] = {}
        if path is not None:
            path = normalize_path(path)
            if not path.exists():
                raise ConfigError(f"Configuration file not found at {path}")
        else:
            source_dir = overrides.get("source_dir") or Path.cwd()
            candidate = cls.get_config_path(source_dir)
            path = candidate if candidate.exists() else None

        if path is not None:
            try:
                with path.open() as fh:
                    raw = json.load(fh)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e
            if not isinstance(raw, dict):
                raise ConfigError(f"Config file {path} must contain a JSON object")

        raw.update({key: value for key, value in overrides.items() if value is not None})

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ConfigError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return self.model_dump(mode="json")

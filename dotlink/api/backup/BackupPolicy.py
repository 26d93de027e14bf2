"""How an existing destination is preserved before it is replaced."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BackupPolicy(BaseModel):
    """Backup strategy and placement.

    ``strategy`` decides whether the original is copied (left in place),
    moved (removed from its location) or not preserved at all.
    ``directory`` selects directory placement; without it the backup is
    placed alongside the original with a ``.bak`` suffix.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    strategy: Literal["none", "copy", "move"] = Field("copy", description="none, copy or move")
    directory: str | None = Field(
        None, description="Backup directory; relative paths resolve against the file's parent"
    )

    @model_validator(mode="after")
    def _directory_needs_strategy(self) -> "BackupPolicy":
        if self.strategy == "none" and self.directory is not None:
            raise ValueError("backup.directory cannot be set when backup.strategy is 'none'")
        return self

    @property
    def enabled(self) -> bool:
        return self.strategy != "none"

    @property
    def move(self) -> bool:
        return self.strategy == "move"

    @classmethod
    def none(cls) -> "BackupPolicy":
        return cls(strategy="none")

    @classmethod
    def copy_to_suffix(cls) -> "BackupPolicy":
        return cls(strategy="copy")

    @classmethod
    def copy_to_directory(cls, directory: str) -> "BackupPolicy":
        return cls(strategy="copy", directory=str(directory))

    @classmethod
    def move_to_suffix(cls) -> "BackupPolicy":
        return cls(strategy="move")

    @classmethod
    def move_to_directory(cls, directory: str) -> "BackupPolicy":
        return cls(strategy="move", directory=str(directory))

"""Output schemas for install commands."""

from pydantic import BaseModel, Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class InstallRunOutput(BaseOutputSchema):
    """Output schema for the install run command.

    Path lists hold link destinations (home-side paths).
    """

    source_dir: str = Field(..., description="Dotfiles repository the links point into")
    user_home: str = Field(..., description="Home directory the links were made in")
    dry_run: bool = Field(..., description="True if nothing was mutated")
    linked: list[str] = Field(default_factory=list, description="New symlinks where nothing existed")
    already_linked: list[str] = Field(default_factory=list, description="Symlinks that were already correct")
    relinked: list[str] = Field(default_factory=list, description="Symlinks that pointed elsewhere and were replaced")
    replaced: list[str] = Field(default_factory=list, description="Files or directories replaced by symlinks")
    failed: list[str] = Field(default_factory=list, description="Destinations that could not be linked")
    backups: list[str] = Field(default_factory=list, description="Backup paths taken before replacing")
    confirmed: int = Field(0, description="Number of dotfiles processed")
    copied: int = Field(0, description="Local config files copied into the home directory")


class LinkStatusEntry(BaseModel):
    name: str
    source: str
    destination: str
    state: str


class InstallStatusOutput(BaseOutputSchema):
    """Output schema for the install status command."""

    source_dir: str = Field(..., description="Dotfiles repository inspected")
    user_home: str = Field(..., description="Home directory inspected")
    entries: list[LinkStatusEntry] = Field(default_factory=list, description="Link state per dotfile")
    pending: int = Field(0, description="Dotfiles a run would change")


register_output_schema("install", "run", InstallRunOutput)
register_output_schema("install", "status", InstallStatusOutput)

"""Fields every install command reports, whatever else it returns."""

from pydantic import BaseModel, Field


class BaseOutputSchema(BaseModel):
    """Common shape of ``cmd_run`` and ``cmd_status`` output.

    A non-empty ``errors`` list is what turns a run into exit code 1: a
    dotfile that could not be linked, a held lock or a trapped signal.
    """

    errors: list[str] = Field(
        default_factory=list, description="Per-dotfile failures and the fatal error that stopped the run, if any"
    )
    warnings: list[str] = Field(default_factory=list, description="Problems that did not fail the run")

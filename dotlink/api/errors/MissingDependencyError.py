"""Missing external tool."""

from .InstallerError import InstallerError


class MissingDependencyError(InstallerError):
    """A required executable could not be found on PATH."""

    def __init__(self, tool: str, hint: str = ""):
        self.tool = tool
        self.hint = hint
        message = f"We must have '{tool}' installed and available in $PATH to run."
        if hint:
            message = f"{message} {hint}"
        super().__init__(message)

"""Expand a leading ``~`` against an explicit home directory."""

from pathlib import Path


def expand_home(path: str | Path, home: Path) -> Path:
    """Replace a leading ``~`` with ``home`` and make the result absolute.

    Unlike ``Path.expanduser`` the home directory is a parameter, so links
    can be installed into a home other than the current user's.

    Examples:
        >>> expand_home("~/.gitconfig", Path("/home/u1"))
        PosixPath('/home/u1/.gitconfig')
    """
    text = str(path)
    if text == "~":
        return home.absolute()
    if text.startswith("~/"):
        return (home / text[2:]).absolute()
    return Path(text).expanduser().absolute()

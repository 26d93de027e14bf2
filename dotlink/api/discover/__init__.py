"""Discover API module."""

from .DEFAULT_EXCLUDES import DEFAULT_EXCLUDES
from .find_dotfiles import find_dotfiles

__all__ = ["DEFAULT_EXCLUDES", "find_dotfiles"]

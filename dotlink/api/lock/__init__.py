"""Advisory script lock."""

from .get_lock_path import get_lock_path
from .ScriptLock import ScriptLock

__all__ = ["ScriptLock", "get_lock_path"]

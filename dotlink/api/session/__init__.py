"""Run lifecycle: signals, lock and temporary directory."""

from .RunSession import RunSession
from .trap_signals import trap_signals

__all__ = ["RunSession", "trap_signals"]

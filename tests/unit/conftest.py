"""Unit test fixtures.

Most fixtures and helpers are in tests/conftest.py.
"""

from tests.conftest import console_text, run_cmd, snapshot

__all__ = ["console_text", "run_cmd", "snapshot"]

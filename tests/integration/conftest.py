"""Shared fixtures for integration tests."""

import pytest


@pytest.fixture
def cli_env(home, repo, lock_dir, monkeypatch):
    """Run the CLI from inside the fixture repo with locks in a private temp dir."""
    monkeypatch.chdir(repo)
    monkeypatch.setenv("TMPDIR", str(lock_dir))
    monkeypatch.setattr("tempfile.tempdir", None)
    return {"home": home, "repo": repo}

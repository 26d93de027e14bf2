"""Shared pytest configuration and fixtures for all tests."""

import io
import os
from pathlib import Path

import pytest
from rich.console import Console

from dotlink.api.config.ExecutionMode import ExecutionMode
from dotlink.api.config.InstallerConfig import InstallerConfig
from dotlink.api.execute.Executor import Executor
from dotlink.api.report.Reporter import Reporter

AREA_MARKERS = {
    "backup": "backup placement and strategies",
    "cli": "command line entry point",
    "config": "configuration models and paths",
    "discover": "dotfile enumeration",
    "errors": "error taxonomy",
    "execute": "execution chokepoint",
    "filename": "unique filename generation",
    "install": "install commands",
    "link": "symlink state machine",
    "local": "local config seeding",
    "lock": "script lock",
    "report": "screen and log file reporting",
    "session": "run lifecycle",
}


def pytest_configure(config):
    for name, description in AREA_MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")
    for name in ("unit", "integration", "smoke"):
        config.addinivalue_line("markers", f"{name}: {name} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def console_text(console: Console) -> str:
    """Everything printed to a capture console."""
    return console.file.getvalue()  # type: ignore[attr-defined]


def snapshot(root: Path) -> dict[str, tuple[str, str | bytes]]:
    """Every entry under ``root`` with its kind and content (or link target)."""
    entries: dict[str, tuple[str, str | bytes]] = {}
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            path = Path(dirpath) / name
            rel = str(path.relative_to(root))
            if path.is_symlink():
                entries[rel] = ("link", os.readlink(path))
            elif path.is_dir():
                entries[rel] = ("dir", "")
            else:
                entries[rel] = ("file", path.read_bytes())
    return entries


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def home(tmp_path, monkeypatch) -> Path:
    """Isolated home directory; DOTLINK_HOME and HOME point at it."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("DOTLINK_HOME", str(home_dir))
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


@pytest.fixture
def repo(tmp_path) -> Path:
    """Dotfiles repository with two files, one directory and some tooling entries."""
    repo_dir = tmp_path / "dotfiles"
    repo_dir.mkdir()
    (repo_dir / ".gitconfig").write_text("[user]\n\tname = Test User\n")
    (repo_dir / ".zshrc").write_text("export EDITOR=vim\n")
    (repo_dir / ".vim").mkdir()
    (repo_dir / ".vim" / "vimrc").write_text("set number\n")
    (repo_dir / ".git").mkdir()
    (repo_dir / ".DS_Store").write_bytes(b"\x00")
    (repo_dir / "README.md").write_text("my dotfiles\n")
    return repo_dir


@pytest.fixture
def lock_dir(tmp_path) -> Path:
    """Temp directory for script locks, separate from the system one."""
    path = tmp_path / "tmp"
    path.mkdir()
    return path


@pytest.fixture
def log_file(tmp_path) -> Path:
    return tmp_path / "logs" / "dotlink-test.log"


@pytest.fixture
def console() -> Console:
    """Console writing to memory, wide enough that nothing wraps."""
    return Console(file=io.StringIO(), width=400, color_system=None)


@pytest.fixture
def mode(log_file) -> ExecutionMode:
    return ExecutionMode(log_file=log_file)


@pytest.fixture
def config(repo, home) -> InstallerConfig:
    return InstallerConfig(source_dir=repo, user_home=home)


@pytest.fixture
def make_executor(console, log_file):
    """Build an Executor (and its Reporter) for the given ExecutionMode flags."""
    reporters: list[Reporter] = []

    def _make(**flags) -> Executor:
        flags.setdefault("log_file", log_file)
        run_mode = ExecutionMode(**flags)
        reporter = Reporter(run_mode, console=console)
        reporters.append(reporter)
        return Executor(run_mode, reporter)

    yield _make
    for reporter in reporters:
        reporter.close()


@pytest.fixture
def executor(make_executor) -> Executor:
    return make_executor()

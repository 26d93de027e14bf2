"""Unit tests for dotlink.api.link.make_symbolic_link module."""

import os
import shutil
from pathlib import Path

import pytest

from dotlink.api.backup.BackupPolicy import BackupPolicy
from dotlink.api.errors.MissingDependencyError import MissingDependencyError
from dotlink.api.errors.MissingSourceError import MissingSourceError
from dotlink.api.errors.UsageError import UsageError
from dotlink.api.link.LinkOutcome import LinkOutcome
from dotlink.api.link.LinkRequest import LinkRequest
from dotlink.api.link.make_symbolic_link import make_symbolic_link
from tests.unit.conftest import console_text, snapshot

pytestmark = pytest.mark.link


def _link(source, destination, executor, policy=None, **kwargs):
    return make_symbolic_link(
        LinkRequest(source, destination),
        policy=policy or BackupPolicy.copy_to_suffix(),
        executor=executor,
        reporter=executor.reporter,
        **kwargs,
    )


def test_absent_destination_is_linked(repo, home, executor, console):
    result = _link(repo / ".gitconfig", home / ".gitconfig", executor)

    assert result.outcome is LinkOutcome.LINKED
    assert result.backup is None
    assert os.readlink(home / ".gitconfig") == str(repo / ".gitconfig")
    assert f"symlink {repo / '.gitconfig'} → {home / '.gitconfig'}" in console_text(console)


def test_missing_parent_is_created(repo, home, executor):
    destination = home / ".config" / "git" / "config"
    _link(repo / ".gitconfig", destination, executor)
    assert destination.is_symlink()


def test_existing_link_is_left_alone(repo, home, executor, console):
    os.symlink(repo / ".gitconfig", home / ".gitconfig")
    before = snapshot(home)

    result = _link(repo / ".gitconfig", home / ".gitconfig", executor)

    assert result.outcome is LinkOutcome.ALREADY_LINKED
    assert snapshot(home) == before
    assert "[   info] Symlink already exists" in console_text(console)


def test_existing_link_only_show_changed_reports_at_debug(repo, home, make_executor, console):
    os.symlink(repo / ".gitconfig", home / ".gitconfig")
    executor = make_executor()
    _link(repo / ".gitconfig", home / ".gitconfig", executor, only_show_changed=True)
    assert console_text(console) == ""


def test_existing_link_under_dry_run_reports_dryrun(repo, home, make_executor, console):
    os.symlink(repo / ".gitconfig", home / ".gitconfig")
    _link(repo / ".gitconfig", home / ".gitconfig", make_executor(dry_run=True))
    assert "[ dryrun] Symlink already exists" in console_text(console)


def test_regular_file_is_backed_up_and_replaced(repo, home, executor):
    (home / ".gitconfig").write_text("mine")

    result = _link(repo / ".gitconfig", home / ".gitconfig", executor)

    assert result.outcome is LinkOutcome.REPLACED
    assert result.backup == home / ".gitconfig.bak"
    assert (home / ".gitconfig.bak").read_text() == "mine"
    assert os.readlink(home / ".gitconfig") == str(repo / ".gitconfig")


def test_second_replacement_gets_numbered_backup(repo, home, executor):
    (home / ".gitconfig.bak").write_text("older")
    (home / ".gitconfig").write_text("mine")

    result = _link(repo / ".gitconfig", home / ".gitconfig", executor)

    assert result.backup == home / ".gitconfig.bak.1"
    assert (home / ".gitconfig.bak").read_text() == "older"
    assert (home / ".gitconfig.bak.1").read_text() == "mine"


def test_symlink_to_other_source_is_relinked(repo, home, executor):
    os.symlink(repo / ".zshrc", home / ".gitconfig")

    result = _link(repo / ".gitconfig", home / ".gitconfig", executor)

    assert result.outcome is LinkOutcome.RELINKED
    assert os.readlink(result.backup) == str(repo / ".zshrc")
    assert os.readlink(home / ".gitconfig") == str(repo / ".gitconfig")


def test_directory_is_replaced(repo, home, executor):
    (home / ".vim").mkdir()
    (home / ".vim" / "old.vim").write_text("old")

    result = _link(repo / ".vim", home / ".vim", executor)

    assert result.outcome is LinkOutcome.REPLACED
    assert (home / ".vim.bak" / "old.vim").read_text() == "old"
    assert (home / ".vim").is_symlink()


def test_no_backup_policy(repo, home, executor):
    (home / ".gitconfig").write_text("mine")

    result = _link(repo / ".gitconfig", home / ".gitconfig", executor, policy=BackupPolicy.none())

    assert result.backup is None
    assert sorted(p.name for p in home.iterdir()) == [".gitconfig"]


def test_move_policy(repo, home, executor):
    (home / ".gitconfig").write_text("mine")

    result = _link(repo / ".gitconfig", home / ".gitconfig", executor, policy=BackupPolicy.move_to_directory("backup"))

    assert result.backup == home / "backup" / "gitconfig"
    assert result.backup.read_text() == "mine"
    assert (home / ".gitconfig").is_symlink()


def test_dangling_destination_is_replaced_without_backup(repo, home, executor):
    os.symlink(home / "gone", home / ".gitconfig")

    result = _link(repo / ".gitconfig", home / ".gitconfig", executor)

    assert result.outcome is LinkOutcome.LINKED
    assert not (home / ".gitconfig.bak").exists()
    assert os.readlink(home / ".gitconfig") == str(repo / ".gitconfig")


def test_missing_source_raises(repo, home, executor):
    with pytest.raises(MissingSourceError, match="not found"):
        _link(repo / ".missing", home / ".missing", executor)


def test_sudo_requires_sudo_on_path(repo, home, executor, monkeypatch):
    monkeypatch.setattr(shutil, "which", lambda tool: None)
    with pytest.raises(MissingDependencyError):
        _link(repo / ".gitconfig", home / ".gitconfig", executor, use_sudo=True)


def test_sudo_removal_goes_through_executor(repo, home, make_executor, console, monkeypatch):
    monkeypatch.setattr(shutil, "which", lambda tool: "/usr/bin/sudo")
    (home / ".gitconfig").write_text("mine")
    executor = make_executor(dry_run=True)

    _link(repo / ".gitconfig", home / ".gitconfig", executor, use_sudo=True)

    assert f'sudo rm -rf "{home / ".gitconfig"}"' in console_text(console)
    assert (home / ".gitconfig").read_text() == "mine"


def test_dry_run_mutates_nothing(repo, home, make_executor):
    (home / ".gitconfig").write_text("mine")
    os.symlink(repo / ".gitconfig", home / ".zshrc")
    executor = make_executor(dry_run=True)
    before = snapshot(home)

    for name in (".gitconfig", ".zshrc", ".vim"):
        _link(repo / name, home / name, executor)
    _link(repo / ".gitconfig", home / "new" / ".gitconfig", executor)

    assert snapshot(home) == before


def test_tilde_destinations_expand_against_configured_home(repo, home, executor):
    request = LinkRequest.build(repo / ".zshrc", "~/.zshrc", home)
    make_symbolic_link(request, policy=BackupPolicy(), executor=executor, reporter=executor.reporter)
    assert (home / ".zshrc").is_symlink()


def test_destination_without_a_name_is_a_usage_error(repo, executor):
    with pytest.raises(UsageError, match="not specified"):
        _link(repo / ".gitconfig", Path("/"), executor)

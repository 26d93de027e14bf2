"""Integration tests for the dotlink command line."""

import json
import os
import signal

import pytest
import yaml

from dotlink.cli import main
from dotlink.cli.display.CLIDisplay import CLIDisplay
from tests.conftest import snapshot

pytestmark = pytest.mark.cli


def test_help_exits_zero(capsys):
    assert main(["-h"]) == 0
    out = capsys.readouterr().out
    assert "--user-home" in out
    assert "--dryrun" in out


def test_version(capsys, monkeypatch):
    monkeypatch.setattr("dotlink.cli._create_app.get_package_version", lambda: "1.2.3")
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == "dotlink 1.2.3"


def test_unknown_option_is_usage_error(capsys):
    assert main(["--bogus"]) == 1
    assert "Usage error" in capsys.readouterr().err


def test_missing_option_value_is_usage_error(capsys):
    assert main(["--user-home"]) == 1


def test_install_links_into_user_home(cli_env, tmp_path):
    home = tmp_path / "other-home"
    home.mkdir()

    assert main(["--user-home", str(home), "--logfile", str(tmp_path / "x.log")]) == 0

    assert os.readlink(home / ".zshrc") == str(cli_env["repo"] / ".zshrc")


def test_dry_run_combined_short_flags(cli_env, capsys, tmp_path):
    before = snapshot(cli_env["home"])

    assert main(["-nv", f"--logfile={tmp_path / 'x.log'}"]) == 0

    assert snapshot(cli_env["home"]) == before
    assert "[ dryrun]" in capsys.readouterr().out


def test_quiet_prints_nothing(cli_env, capsys, tmp_path):
    assert main(["-q", "--logfile", str(tmp_path / "x.log")]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_loglevel_is_case_insensitive(cli_env, tmp_path):
    log_file = tmp_path / "x.log"
    assert main(["--loglevel=notice", "--logfile", str(log_file)]) == 0
    assert "Symlinks confirmed: 3" in log_file.read_text()


def test_display_json(cli_env, capsys, tmp_path):
    assert main(["--display", "json", "--logfile", str(tmp_path / "x.log")]) == 0
    out = capsys.readouterr().out
    data = json.loads(out[out.index("{") :])
    assert data["confirmed"] == 3
    assert len(data["linked"]) == 3


def test_status_yaml(cli_env, capsys):
    assert main(["--status", "--display", "yaml", "-q"]) == 0
    data = yaml.safe_load(capsys.readouterr().out)
    assert data["pending"] == 3
    assert not (cli_env["home"] / ".zshrc").exists()


def test_invalid_display_format(cli_env, capsys):
    assert main(["--display", "xml"]) == 1
    assert "--display must be 'json' or 'yaml'" in capsys.readouterr().err


def test_invalid_config_file(cli_env, capsys):
    (cli_env["repo"] / "dotlink.json").write_text("{broken")
    assert main([]) == 1
    assert "Invalid JSON" in capsys.readouterr().err


def test_per_entry_failure_exits_one(cli_env, tmp_path):
    os.symlink(tmp_path / "gone", cli_env["repo"] / ".broken")
    assert main(["-q", "--logfile", str(tmp_path / "x.log")]) == 1
    assert (cli_env["home"] / ".zshrc").is_symlink()


def test_lock_held_exits_one(cli_env, lock_dir, tmp_path):
    (lock_dir / f"dotlink.{os.getuid()}.lock").mkdir()
    assert main(["-q", "--logfile", str(tmp_path / "x.log")]) == 1
    assert not (cli_env["home"] / ".zshrc").exists()


def _raise_on_second_call(monkeypatch, raise_it):
    """Make the second progress line trigger ``raise_it``."""
    calls = []
    original = CLIDisplay.info

    def _info(self, message, **kwargs):
        calls.append(message)
        if len(calls) == 2:
            raise_it()
        original(self, message, **kwargs)

    monkeypatch.setattr(CLIDisplay, "info", _info)


def test_signal_while_printing_progress_is_fatal(cli_env, capsys, lock_dir, monkeypatch, tmp_path):
    handler_before = signal.getsignal(signal.SIGTERM)
    _raise_on_second_call(monkeypatch, lambda: os.kill(os.getpid(), signal.SIGTERM))

    assert main(["--logfile", str(tmp_path / "x.log")]) == 1

    assert "[  fatal] Trapped signal SIGTERM" in capsys.readouterr().out
    assert list(lock_dir.iterdir()) == []
    assert signal.getsignal(signal.SIGTERM) == handler_before


def test_interrupt_while_printing_progress_is_fatal(cli_env, capsys, lock_dir, monkeypatch, tmp_path):
    def _interrupt():
        raise KeyboardInterrupt

    _raise_on_second_call(monkeypatch, _interrupt)

    assert main(["--logfile", str(tmp_path / "x.log")]) == 1

    assert "[  fatal] Trapped signal SIGINT" in capsys.readouterr().out
    assert list(lock_dir.iterdir()) == []


def test_interrupt_before_the_run_starts_is_fatal(cli_env, capsys, monkeypatch):
    def _status(self, message, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(CLIDisplay, "status", _status)

    assert main(["--status"]) == 1
    assert "[  fatal] Trapped signal SIGINT" in capsys.readouterr().err

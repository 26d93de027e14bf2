"""Install command: link every dotfile and seed local config files."""

import signal
from collections.abc import Iterator
from pathlib import Path

from rich.console import Console

from ..config.ExecutionMode import ExecutionMode
from ..config.get_default_logfile import get_default_logfile
from ..config.InstallerConfig import InstallerConfig
from ..discover.find_dotfiles import find_dotfiles
from ..errors.CommandFailedError import CommandFailedError
from ..errors.InstallerError import InstallerError
from ..errors.MissingSourceError import MissingSourceError
from ..errors.TrappedSignalError import TrappedSignalError
from ..errors.UsageError import UsageError
from ..execute.Executor import Executor
from ..link.LinkOutcome import LinkOutcome
from ..link.LinkRequest import LinkRequest
from ..link.make_symbolic_link import make_symbolic_link
from ..local.copy_local_config_files import copy_local_config_files
from ..report.Reporter import Reporter
from ..session.RunSession import RunSession
from ..StageResult import StageResult

_OUTCOME_KEYS = {
    LinkOutcome.LINKED: "linked",
    LinkOutcome.ALREADY_LINKED: "already_linked",
    LinkOutcome.RELINKED: "relinked",
    LinkOutcome.REPLACED: "replaced",
}


def cmd_run(
    config: InstallerConfig,
    mode: ExecutionMode,
    *,
    console: Console | None = None,
    tmp_dir: Path | None = None,
) -> StageResult:
    """Link the repository's dotfiles into the user's home directory.

    A failure on one dotfile is reported and the rest are still processed;
    anything else that goes wrong (lock held, missing sudo, a signal) stops
    the run after cleanup and is reported as fatal.

    Args:
        config: What to link and where
        mode: Dry-run, verbosity and logging flags for this run
        console: Screen for reports (defaults to stdout)
        tmp_dir: Where the lock and temp directory go (defaults to the system temp dir)
    """
    if mode.log_file is None:
        mode = mode.model_copy(update={"log_file": get_default_logfile(config.source_dir)})

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        reporter = Reporter(mode, console=console)
        executor = Executor(mode, reporter)
        errors: list[str] = []
        warnings: list[str] = []
        outcomes: dict[str, list[str]] = {key: [] for key in (*_OUTCOME_KEYS.values(), "failed")}
        backups: list[str] = []
        confirmed = 0
        copied = 0
        fatal: InstallerError | None = None

        try:
            with RunSession(config, reporter, tmp_dir=tmp_dir):
                yield (0.1, "Discovering dotfiles...")
                if not config.source_dir.is_dir():
                    raise UsageError(f"Dotfiles directory not found: {config.source_dir}")
                candidates = find_dotfiles(config.source_dir, config.exclude)
                reporter.debug(f"Found {len(candidates)} dotfile(s) in {config.source_dir}")

                for index, source in enumerate(candidates):
                    yield (0.1 + 0.7 * index / len(candidates), f"Linking {source.name}...")
                    destination = config.user_home / source.name
                    confirmed += 1
                    try:
                        link_result = make_symbolic_link(
                            LinkRequest(source, destination),
                            policy=config.backup,
                            executor=executor,
                            reporter=reporter,
                            use_sudo=config.use_sudo,
                            only_show_changed=True,
                        )
                    except (MissingSourceError, CommandFailedError) as e:
                        reporter.error(e.message, trace=e.trace)
                        errors.append(f"{destination}: {e.message}")
                        outcomes["failed"].append(str(destination))
                        continue
                    outcomes[_OUTCOME_KEYS[link_result.outcome]].append(str(destination))
                    if link_result.backup is not None:
                        backups.append(str(link_result.backup))

                reporter.notice(f"Symlinks confirmed: {confirmed}")

                yield (0.9, "Copying local config files...")
                copied = copy_local_config_files(config.local_path, config.user_home, executor, reporter)
        except KeyboardInterrupt:
            fatal = TrappedSignalError(signal.SIGINT)
        except InstallerError as e:
            fatal = e

        if fatal is not None:
            reporter.fatal(fatal.message, trace=fatal.trace)
            errors.append(fatal.message)
        reporter.close()

        yield (1.0, "Complete")
        if fatal is not None:
            result_obj.result = f"Install aborted: {fatal.message}"
        else:
            changed = len(outcomes["linked"]) + len(outcomes["relinked"]) + len(outcomes["replaced"])
            verb = "Would link" if mode.dry_run else "Linked"
            result_obj.result = (
                f"{verb} {changed} of {confirmed} dotfile(s), "
                f"{len(outcomes['already_linked'])} already linked, {len(outcomes['failed'])} failed"
            )
        result_obj.output = {
            "errors": errors,
            "warnings": warnings,
            "source_dir": str(config.source_dir),
            "user_home": str(config.user_home),
            "dry_run": mode.dry_run,
            **outcomes,
            "backups": backups,
            "confirmed": confirmed,
            "copied": copied,
        }
        result_obj.success = len(errors) == 0

    announce = (
        f"Dry run: linking dotfiles from {config.source_dir} into {config.user_home}..."
        if mode.dry_run
        else f"Linking dotfiles from {config.source_dir} into {config.user_home}..."
    )
    return StageResult(announce=announce, progress_callback=do_work)

"""Create the dotlink Typer CLI app."""

from pathlib import Path

import typer

from dotlink.api.config.ConfigError import ConfigError
from dotlink.api.config.ExecutionMode import ExecutionMode
from dotlink.api.config.get_package_version import get_package_version
from dotlink.api.config.InstallerConfig import InstallerConfig
from dotlink.api.config.LogLevel import LogLevel
from dotlink.api.install.cmd_run import cmd_run
from dotlink.api.install.cmd_status import cmd_status
from dotlink.cli._handle_stage_result import _handle_stage_result
from dotlink.constants import PROGRAM_NAME

_LOG_LEVELS = " ".join(level.value for level in LogLevel)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROGRAM_NAME} {get_package_version()}")
        raise typer.Exit()


def _create_app() -> typer.Typer:
    """Create and configure the CLI Typer app."""
    app = typer.Typer(
        name=PROGRAM_NAME,
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        add_completion=False,
        context_settings={"help_option_names": ["-h", "--help"]},
    )

    @app.command()
    def install(
        user_home: Path | None = typer.Option(None, "--user-home", help="Home directory to link into"),
        source_dir: Path | None = typer.Option(
            None, "--source-dir", help="Dotfiles repository (default: current directory)"
        ),
        config_path: Path | None = typer.Option(
            None, "--config", help="JSON config file (default: <source-dir>/dotlink.json)"
        ),
        loglevel: str = typer.Option(
            LogLevel.ERROR.value, "--loglevel", help=f"One of: {_LOG_LEVELS} (case-insensitive)"
        ),
        logfile: Path | None = typer.Option(None, "--logfile", help="Full PATH to logfile"),
        dryrun: bool = typer.Option(False, "-n", "--dryrun", help="Non-destructive. Makes no permanent changes."),
        quiet: bool = typer.Option(False, "-q", "--quiet", help="Quiet (no output)"),
        verbose: bool = typer.Option(False, "-v", "--verbose", help="Output more information"),
        force: bool = typer.Option(False, "--force", help="Skip all user interaction. Implied 'Yes' to all actions."),
        sudo: bool = typer.Option(False, "--sudo", help="Remove replaced destinations with sudo"),
        status: bool = typer.Option(False, "--status", help="Only report the state of each link"),
        display: str | None = typer.Option(None, "--display", "-d", help="Print structured output: json or yaml"),
        version: bool = typer.Option(  # noqa: ARG001
            False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
        ),
    ) -> None:
        """Symlink the dotfiles in a repository into a home directory.

        Anything a link would overwrite is backed up first. Running again
        changes nothing that is already linked.
        """
        if display is not None and display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        try:
            config = InstallerConfig.load(
                config_path,
                source_dir=source_dir,
                user_home=user_home,
                use_sudo=True if sudo else None,
            )
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e

        if status:
            _handle_stage_result(cmd_status, display_format=display, suppress_output=quiet)(config)
            return

        mode = ExecutionMode(
            dry_run=dryrun,
            verbose=verbose,
            quiet=quiet,
            force=force,
            log_level=loglevel,
            log_file=logfile,
        )
        _handle_stage_result(cmd_run, display_format=display, suppress_output=quiet)(config, mode)

    return app

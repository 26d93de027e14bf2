"""CLI - main entry point."""

import signal
import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    import click
    import typer

    from dotlink.api.errors.InstallerError import InstallerError
    from dotlink.api.errors.TrappedSignalError import TrappedSignalError
    from dotlink.cli._create_app import _create_app
    from dotlink.constants import PROGRAM_NAME

    if argv is None:
        argv = sys.argv[1:]

    # Recent typer releases bundle their own click; catch both hierarchies.
    usage_errors = (
        click.exceptions.UsageError,
        *(cls for cls in typer.BadParameter.__mro__ if cls.__name__ == "UsageError"),
    )
    aborts = (click.exceptions.Abort, typer.Abort)

    app = _create_app()
    try:
        code = app(argv, prog_name=PROGRAM_NAME, standalone_mode=False)
    except usage_errors as e:
        typer.echo(f"Usage error: {e.format_message()}", err=True)
        return 1
    except aborts:
        typer.echo("Aborted.", err=True)
        return 1
    except (InstallerError, KeyboardInterrupt) as e:
        error = e if isinstance(e, InstallerError) else TrappedSignalError(signal.SIGINT)
        typer.echo(f"[{'fatal':>7}] {error.message}", err=True)
        return 1
    return code if isinstance(code, int) else 0

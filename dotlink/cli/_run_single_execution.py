"""Run command once and display result using 4-stage pattern."""

from collections.abc import Callable
from typing import TypeVar

import typer

from dotlink.api.errors.InstallerError import InstallerError
from dotlink.api.validate_output import validate_output
from dotlink.cli.display.Display import Display

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Display,
    display_format: str | None,
    suppress_output: bool = False,
) -> None:
    """Run command once and display result.

    Commands handle their own failures and report them through their
    output schema; the exit code follows ``result.success``. Structured
    output is printed only when a ``display_format`` was requested.

    Raises:
        typer.Exit: Always, with 0 on success and 1 otherwise
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    if not suppress_output:
        display.status(result.announce)

    # Stage 2: Progress
    progress = result.progress_callback(result)
    interrupted: BaseException | None = None
    while True:
        try:
            if interrupted is None:
                progress_percent, message = next(progress)
            else:
                # Resume the command at its yield so it cleans up and reports the failure itself.
                progress_percent, message = progress.throw(interrupted)
        except StopIteration:
            break
        interrupted = None
        try:
            if not suppress_output:
                display.info(f"[dim]Progress: {message} ({progress_percent:.0%})[/dim]")
        except (InstallerError, KeyboardInterrupt) as e:
            interrupted = e

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    try:
        result.output = validate_output(func, result.output)
    except ValueError as e:
        raise ValueError(f"Output structure validation failed: {e}") from e

    # Stage 3: Result
    if not suppress_output:
        if result.success:
            display.success(result.result)
        else:
            display.error(result.result)

    # Stage 4: Output
    if display_format is not None:
        display.json_output(result.output, format=display_format)

    raise typer.Exit(0 if result.success else 1)

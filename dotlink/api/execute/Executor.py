"""The one place installer mutations are issued."""

import logging
import subprocess

from ..config.ExecutionMode import ExecutionMode
from ..errors.CommandFailedError import CommandFailedError
from ..report.caller_location import caller_location
from ..report.Reporter import Reporter
from .Operation import Operation

logger = logging.getLogger(__name__)


class Executor:
    """Run operations while honoring the run's dry-run and verbosity flags.

    Every mutating step goes through ``execute`` so dry-run is enforced in
    one place: under dry-run nothing runs, the operation is reported at
    ``dryrun`` severity together with its caller, and the call succeeds.
    """

    def __init__(self, mode: ExecutionMode, reporter: Reporter):
        self.mode = mode
        self.reporter = reporter

    @property
    def dry_run(self) -> bool:
        return self.mode.dry_run

    def execute(
        self,
        operation: Operation,
        message: str = "",
        *,
        verbose: bool = False,
        pass_failures: bool = False,
        echo: bool = False,
        success: bool = False,
        notice: bool = False,
        quiet: bool = False,
    ) -> bool:
        """Run ``operation`` and report the outcome.

        Args:
            operation: The mutation to perform
            message: Reported instead of the operation's description
            verbose: Show native command output for this call only
            pass_failures: Report a failure and return False instead of raising
            echo: Report as a plain, unstyled line
            success: Report success at ``success`` severity
            notice: Report success at ``notice`` severity
            quiet: Report nothing

        Returns:
            True on success (always under dry-run), False for a passed failure

        Raises:
            CommandFailedError: If the operation fails and failures are not passed
        """
        result_message = message or operation.description

        with self.reporter.verbosity(verbose):
            if self.mode.dry_run:
                if not quiet:
                    text = f"{operation.description} ({message})" if message else operation.description
                    self.reporter.dryrun(text, caller_location())
                return True

            ok, detail = self._run(operation)

            if ok:
                if quiet:
                    pass
                elif echo:
                    self.reporter.echo(result_message)
                elif success:
                    self.reporter.success(result_message)
                elif notice:
                    self.reporter.notice(result_message)
                else:
                    self.reporter.info(result_message)
                return True

            if not quiet:
                if echo:
                    prefix = "warning" if self.reporter.verbose else "error"
                    self.reporter.echo(f"{prefix}: {result_message}")
                else:
                    self.reporter.warning(result_message)
                if detail:
                    self.reporter.debug(detail)

        if pass_failures:
            return False
        raise CommandFailedError(f"{result_message}: {detail}" if detail else result_message)

    def _run(self, operation: Operation) -> tuple[bool, str]:
        """Perform the operation. Returns (succeeded, failure detail)."""
        if operation.argv is not None:
            capture = not self.reporter.verbose
            logger.debug("Running %s", operation.argv)
            try:
                completed = subprocess.run(
                    list(operation.argv),
                    check=False,
                    capture_output=capture,
                    text=True,
                )
            except OSError as e:
                return False, str(e)
            if completed.returncode == 0:
                return True, ""
            detail = (completed.stderr or "").strip() if capture else ""
            return False, detail or f"exit code {completed.returncode}"

        assert operation.action is not None
        try:
            operation.action()
        except OSError as e:
            return False, str(e)
        return True, ""

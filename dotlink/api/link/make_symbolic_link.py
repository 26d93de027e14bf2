"""Idempotent symlink creation with backup of whatever it replaces."""

from ..backup.backup_file import backup_file
from ..backup.BackupPolicy import BackupPolicy
from ..errors.MissingSourceError import MissingSourceError
from ..errors.UsageError import UsageError
from ..execute import operations
from ..execute.Executor import Executor
from ..report.Reporter import Reporter
from .classify_destination import classify_destination
from .LinkOutcome import LinkOutcome, LinkResult
from .LinkRequest import LinkRequest
from .LinkState import LinkState
from .require_tool import require_tool

_OUTCOMES = {
    LinkState.ABSENT: LinkOutcome.LINKED,
    LinkState.SYMLINK_TO_OTHER_SOURCE: LinkOutcome.RELINKED,
    LinkState.REGULAR_FILE_OR_DIR: LinkOutcome.REPLACED,
}


def make_symbolic_link(
    request: LinkRequest,
    *,
    policy: BackupPolicy,
    executor: Executor,
    reporter: Reporter,
    use_sudo: bool = False,
    only_show_changed: bool = False,
) -> LinkResult:
    """Make ``request.destination`` a symlink to ``request.source``.

    An existing symlink to the same source is left alone. Anything else at
    the destination (another symlink, a file, a directory) is backed up per
    ``policy``, removed and replaced. Every mutation goes through
    ``executor``, so under dry-run the filesystem is untouched.

    Args:
        request: Source and destination, already expanded
        policy: How a replaced destination is preserved
        executor: Execution chokepoint
        reporter: Where the no-op case is reported
        use_sudo: Remove replaced destinations with ``sudo rm -rf``
        only_show_changed: Report an existing identical link at debug only

    Returns:
        The outcome and the backup path (if one was taken)

    Raises:
        MissingSourceError: If the source does not exist
        UsageError: If the destination is empty
        MissingDependencyError: If ``use_sudo`` is set and sudo is unavailable
        CommandFailedError: If a backup, removal or link fails
    """
    source, destination = request.source, request.destination

    if not source.exists():
        raise MissingSourceError(f"'{source}' not found")
    if not destination.name:
        raise UsageError(f"Symlink destination '{destination}' not specified")
    if use_sudo:
        require_tool("sudo")

    if not destination.parent.is_dir():
        executor.execute(operations.mkdir(destination.parent))

    link_message = f"symlink {source} → {destination}"
    state = classify_destination(source, destination)

    if state is LinkState.SYMLINK_TO_SAME_SOURCE:
        message = f"Symlink already exists: {source} → {destination}"
        if only_show_changed:
            reporter.debug(message)
        elif executor.dry_run:
            reporter.dryrun(message)
        else:
            reporter.info(message)
        return LinkResult(LinkOutcome.ALREADY_LINKED)

    backup = None
    if state is not LinkState.ABSENT:
        backup = backup_file(destination, policy, executor)
        if not policy.move:
            executor.execute(operations.remove(destination, sudo=use_sudo))

    executor.execute(operations.symlink(source, destination), link_message)
    return LinkResult(_OUTCOMES[state], backup)

"""Status command: show what a run would do, without doing it."""

from collections.abc import Iterator

from ..config.InstallerConfig import InstallerConfig
from ..discover.find_dotfiles import find_dotfiles
from ..link.classify_destination import classify_destination
from ..link.LinkState import LinkState
from ..StageResult import StageResult


def cmd_status(config: InstallerConfig) -> StageResult:
    """Classify the destination of every dotfile in the repository."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Discovering dotfiles...")
        if not config.source_dir.is_dir():
            yield (1.0, "Complete")
            result_obj.result = f"Dotfiles directory not found: {config.source_dir}"
            result_obj.output = {
                "errors": [result_obj.result],
                "warnings": [],
                "source_dir": str(config.source_dir),
                "user_home": str(config.user_home),
                "entries": [],
                "pending": 0,
            }
            result_obj.success = False
            return

        yield (0.6, "Inspecting destinations...")
        entries = []
        pending = 0
        for source in find_dotfiles(config.source_dir, config.exclude):
            destination = config.user_home / source.name
            state = classify_destination(source, destination)
            if state is not LinkState.SYMLINK_TO_SAME_SOURCE:
                pending += 1
            entries.append(
                {
                    "name": source.name,
                    "source": str(source),
                    "destination": str(destination),
                    "state": state.value,
                }
            )

        yield (1.0, "Complete")
        result_obj.result = f"{len(entries)} dotfile(s), {pending} not linked"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "source_dir": str(config.source_dir),
            "user_home": str(config.user_home),
            "entries": entries,
            "pending": pending,
        }
        result_obj.success = True

    return StageResult(announce=f"Checking dotfile links in {config.user_home}...", progress_callback=do_work)

"""Shared constants for dotlink."""

PROGRAM_NAME = "dotlink"

DOTLINK_HOME_ENV = "DOTLINK_HOME"  # overrides the user's home directory (test isolation)

CONFIG_FILENAME = "dotlink.json"  # looked up in the dotfiles repository root

LOGS_DIRNAME = "logs"

BACKUP_SUFFIX = ".bak"

DEFAULT_BACKUP_DIRNAME = "backup"

DEFAULT_LOCAL_DIRNAME = "local"

# Log file timestamps, e.g. "Oct 18 01:41:07"
LOG_TIMESTAMP_FORMAT = "%b %d %H:%M:%S"

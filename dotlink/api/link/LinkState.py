"""What currently occupies a link destination."""

from enum import Enum


class LinkState(Enum):
    ABSENT = "absent"
    SYMLINK_TO_SAME_SOURCE = "symlink_to_same_source"
    SYMLINK_TO_OTHER_SOURCE = "symlink_to_other_source"
    REGULAR_FILE_OR_DIR = "regular_file_or_dir"

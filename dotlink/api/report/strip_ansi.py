import re

# CSI color/erase sequences, with or without the ESC byte (e.g. "\x1b[1;31m", "[0m")
ANSI_PATTERN = re.compile(r"(\x1b)?\[(([0-9]{1,2})(;[0-9]{1,3}){0,2})?[mGK]")


def strip_ansi(text: str) -> str:
    """Remove terminal color codes so log lines stay plain text."""
    return ANSI_PATTERN.sub("", text)

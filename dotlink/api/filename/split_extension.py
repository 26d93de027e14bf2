from .COMPOUND_EXTENSIONS import COMPOUND_EXTENSIONS


def split_extension(name: str) -> tuple[str, str]:
    """Split a file name into ``(base, extension)``.

    The extension keeps its leading dot and original case. Compound archive
    suffixes stay together; a leading dot alone (``.gitconfig``) is part of
    the base, not an extension.

    Examples:
        >>> split_extension("notes.txt")
        ('notes', '.txt')
        >>> split_extension("backup.TAR.gz")
        ('backup', '.TAR.gz')
        >>> split_extension(".gitconfig.bak")
        ('.gitconfig', '.bak')
        >>> split_extension(".zshrc")
        ('.zshrc', '')
    """
    lowered = name.lower()
    for compound in COMPOUND_EXTENSIONS:
        if lowered.endswith(compound) and len(name) > len(compound):
            cut = len(name) - len(compound)
            return name[:cut], name[cut:]

    dot = name.rfind(".")
    if dot <= 0 or dot == len(name) - 1:
        return name, ""
    # Names made only of leading dots (e.g. "..") have no extension either.
    if not name[:dot].strip("."):
        return name, ""
    return name[:dot], name[dot:]

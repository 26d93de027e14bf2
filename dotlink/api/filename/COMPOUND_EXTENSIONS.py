# Two-level suffixes treated as a single extension unit (matched case-insensitively).
COMPOUND_EXTENSIONS = (".tar.gz", ".tar.bz2", ".tar.xz")

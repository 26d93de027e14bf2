# Repository-level dot entries that are tooling, not dotfiles.
DEFAULT_EXCLUDES = (
    ".vscode",
    ".git",
    ".gitmodules",
    ".DS_Store",
    ".yamllint.yml",
    ".ansible-lint.yml",
    ".hooks",
)

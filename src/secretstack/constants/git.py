"""Version-control paths and ignore-file text."""

from __future__ import annotations

GIT_DIRNAME: str = ".git"
COMMIT_LOG_PARTS: tuple[str, ...] = (".git", "logs", "HEAD")
GITIGNORE_FILENAME: str = ".gitignore"

IGNORE_BLOCK_TEMPLATE: str = "\n# Ignore {folder} folder\n{folder}\n"
IGNORE_CONFIRM_TEMPLATE: str = (
    "The {folder} folder stores scan reports. Add it to .gitignore to avoid Git tracking?"
)
IGNORE_SUCCESS_TEMPLATE: str = "{folder} folder added to .gitignore in {roots}."
IGNORE_FAILURE_TEMPLATE: str = "Failed to add {folder} folder to .gitignore."

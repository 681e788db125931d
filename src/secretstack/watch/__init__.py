"""File-change watches for commit logs and settings."""

from .polling import FileChangeWatch, WatchHandle
from .trigger import CommitWatchTrigger, commit_log_path, commit_log_watch, root_id

__all__ = [
    "CommitWatchTrigger",
    "FileChangeWatch",
    "WatchHandle",
    "commit_log_path",
    "commit_log_watch",
    "root_id",
]

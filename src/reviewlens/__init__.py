"""ReviewLens - branch change sets with cosmetic-change classification."""

from reviewlens.git import (
    BranchNotFoundError,
    GitError,
    NotARepositoryError,
    NoWorkingDirectoryError,
    ReadFailureError,
    ReviewOps,
    get_file_diff,
    get_repo_info,
    list_changed_files,
    open_in_editor,
)
from reviewlens.review.models import ChangedFileSummary, ChangeLine, FileDiff, Hunk

__version__ = "0.1.0"

__all__ = [
    "ReviewOps",
    "get_file_diff",
    "get_repo_info",
    "list_changed_files",
    "open_in_editor",
    "ChangeLine",
    "ChangedFileSummary",
    "FileDiff",
    "Hunk",
    "GitError",
    "NotARepositoryError",
    "BranchNotFoundError",
    "ReadFailureError",
    "NoWorkingDirectoryError",
]

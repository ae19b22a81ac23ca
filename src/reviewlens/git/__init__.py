"""Git access and review operations module."""

from reviewlens.git.errors import (
    BranchNotFoundError,
    GitError,
    NotARepositoryError,
    NoWorkingDirectoryError,
    ReadFailureError,
)
from reviewlens.git.models import BranchInfo, RepoInfo
from reviewlens.git.ops import (
    ReviewOps,
    get_file_diff,
    get_repo_info,
    list_changed_files,
    open_in_editor,
)

__all__ = [
    # Main class
    "ReviewOps",
    # Entry points
    "get_file_diff",
    "get_repo_info",
    "list_changed_files",
    "open_in_editor",
    # Models
    "BranchInfo",
    "RepoInfo",
    # Errors
    "GitError",
    "NotARepositoryError",
    "BranchNotFoundError",
    "ReadFailureError",
    "NoWorkingDirectoryError",
]

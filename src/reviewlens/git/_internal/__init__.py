"""Internal components for git access - not part of public API."""

from reviewlens.git._internal.access import RepoAccess
from reviewlens.git._internal.errors import ErrorMapper, git_operation

__all__ = [
    "ErrorMapper",
    "RepoAccess",
    "git_operation",
]

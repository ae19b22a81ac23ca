"""Git module error types."""


class GitError(Exception):
    """Base error for repository access and diff computation."""

    pass


class NotARepositoryError(GitError):
    """Path is not inside a git repository."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Not a git repository: {path}")
        self.path = path


class BranchNotFoundError(GitError):
    """Base branch has neither a local nor a remote-tracking match."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Could not find branch '{name}'")
        self.name = name


class ReadFailureError(GitError):
    """Underlying repository or filesystem read failed."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"{operation} failed: {reason}")
        self.operation = operation
        self.reason = reason


class NoWorkingDirectoryError(GitError):
    """Operation needs a working directory but the repository is bare."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Cannot {operation}: repository has no working directory")
        self.operation = operation

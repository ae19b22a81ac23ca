"""Repository access layer - owns pygit2.Repository and exposes computed facts."""

from __future__ import annotations

import contextlib
from pathlib import Path

import pygit2

from reviewlens.git._internal.constants import DIFF_INCLUDE_UNTRACKED, DIFF_NORMAL
from reviewlens.git._internal.errors import git_operation
from reviewlens.git.errors import (
    BranchNotFoundError,
    NotARepositoryError,
    NoWorkingDirectoryError,
    ReadFailureError,
)


class RepoAccess:
    """Owns pygit2.Repository and provides normalized access to repo state.

    Every read goes straight to the repository; nothing is cached between
    calls so results always reflect the current on-disk state.
    """

    def __init__(self, repo_path: Path | str) -> None:
        self._path = Path(repo_path)
        try:
            found = pygit2.discover_repository(str(self._path))
        except pygit2.GitError as e:
            raise NotARepositoryError(str(self._path)) from e
        if found is None:
            raise NotARepositoryError(str(self._path))
        try:
            self._repo = pygit2.Repository(found)
        except pygit2.GitError as e:
            raise NotARepositoryError(str(self._path)) from e

    @property
    def repo(self) -> pygit2.Repository:
        return self._repo

    @property
    def workdir(self) -> str | None:
        """Working directory path, or None for bare repos."""
        return self._repo.workdir

    @property
    def path(self) -> Path:
        return Path(self._repo.workdir) if self._repo.workdir else Path(self._repo.path)

    def must_workdir(self, operation: str) -> Path:
        workdir = self._repo.workdir
        if not workdir:
            raise NoWorkingDirectoryError(operation)
        return Path(workdir)

    # =========================================================================
    # Repository State Facts
    # =========================================================================

    @property
    def is_unborn(self) -> bool:
        return self._repo.head_is_unborn

    @property
    def is_detached(self) -> bool:
        return self._repo.head_is_detached

    def head_shorthand(self) -> str:
        """Current branch shorthand, or ``HEAD`` when detached or unborn."""
        if self.is_unborn or self.is_detached:
            return "HEAD"
        with git_operation("read HEAD"):
            return self._repo.head.shorthand

    def must_head_commit(self) -> pygit2.Commit:
        if self.is_unborn:
            raise ReadFailureError("read HEAD", "HEAD has no commits (unborn branch)")
        with git_operation("read HEAD"):
            return self._repo.head.peel(pygit2.Commit)

    # =========================================================================
    # Branch Access
    # =========================================================================

    def local_branch_names(self) -> list[str]:
        return list(self._repo.branches.local)

    def remote_branch_names(self) -> list[str]:
        return list(self._repo.branches.remote)

    def local_branch(self, name: str) -> pygit2.Branch | None:
        if name in self._repo.branches.local:
            return self._repo.branches.local[name]
        return None

    def remote_branch(self, name: str) -> pygit2.Branch | None:
        if name in self._repo.branches.remote:
            return self._repo.branches.remote[name]
        return None

    def resolve_branch_commit(self, name: str, *, remote: str = "origin") -> pygit2.Commit:
        """Resolve a base branch: local first, then ``<remote>/<name>``."""
        with git_operation(f"resolve branch {name!r}"):
            try:
                branch = self.local_branch(name) or self.remote_branch(f"{remote}/{name}")
            except ValueError as e:
                # pygit2.InvalidSpecError: not a valid ref name, so no branch can match
                raise BranchNotFoundError(name) from e
            if branch is None:
                raise BranchNotFoundError(name)
            return branch.peel(pygit2.Commit)

    def must_merge_base(self, head: pygit2.Commit, base: pygit2.Commit) -> pygit2.Commit:
        """Lowest common ancestor of two commits."""
        with git_operation("compute merge base"):
            oid = self._repo.merge_base(head.id, base.id)
            if oid is None:
                reason = f"no common ancestor of {head.short_id} and {base.short_id}"
                raise ReadFailureError("compute merge base", reason)
            return self._repo[oid].peel(pygit2.Commit)

    # =========================================================================
    # Diffs and Status
    # =========================================================================

    def diff_trees(
        self, old: pygit2.Tree, new: pygit2.Tree, *, context_lines: int = 3
    ) -> pygit2.Diff:
        with git_operation("diff trees"):
            return old.diff_to_tree(new, flags=DIFF_NORMAL, context_lines=context_lines)

    def diff_tree_to_workdir_with_index(
        self, old: pygit2.Tree, *, context_lines: int = 3, include_untracked: bool = True
    ) -> pygit2.Diff:
        """Tree -> index -> working tree, merged into one diff.

        Staged and unstaged edits both show up relative to ``old``.
        """
        flags = DIFF_INCLUDE_UNTRACKED if include_untracked else DIFF_NORMAL
        with git_operation("diff working tree"):
            index = self._repo.index
            index.read()
            staged = old.diff_to_index(index, flags=DIFF_NORMAL, context_lines=context_lines)
            unstaged = index.diff_to_workdir(flags=flags, context_lines=context_lines)
            staged.merge(unstaged)
            return staged

    def status(self) -> dict[str, int]:
        """Status flags by path, recursing into untracked directories."""
        with git_operation("read status"):
            return self._repo.status(untracked_files="all", ignored=False)

    # =========================================================================
    # Working Directory Files
    # =========================================================================

    def normalize_path(self, path: str | Path) -> str:
        p = Path(path)
        if p.is_absolute():
            with contextlib.suppress(ValueError):
                p = p.relative_to(self.path)
        return p.as_posix()

    def read_workdir_file(self, rel_path: str) -> bytes | None:
        """Raw bytes of a working-directory file, or None if it does not exist.

        Paths that resolve outside the working directory are refused.
        """
        workdir = self.must_workdir("read untracked file").resolve()
        full_path = (workdir / rel_path).resolve()
        if not full_path.is_relative_to(workdir):
            raise ReadFailureError(f"read {rel_path}", "path is outside the working directory")
        if not full_path.is_file():
            return None
        with git_operation(f"read {rel_path}"):
            return full_path.read_bytes()

"""Review operations via pygit2 - returns serializable data models."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import click
import pygit2
import structlog

from reviewlens.config import ReviewLensConfig, load_config
from reviewlens.git._internal import RepoAccess, git_operation
from reviewlens.git.errors import ReadFailureError
from reviewlens.git.models import BranchInfo, RepoInfo, pick_default_base
from reviewlens.review.aggregate import aggregate_changes
from reviewlens.review.assemble import assemble_file_diff
from reviewlens.review.models import ChangedFileSummary, FileDiff
from reviewlens.review.sources import (
    DEFAULT_SOURCES,
    DiffSource,
    SourceContext,
    resolve_source,
)

log = structlog.get_logger(__name__)


class ReviewOps:
    """Read-only review queries against one repository.

    Each call re-reads repository state; instances hold no results between
    calls and never modify the repository.
    """

    def __init__(self, repo_path: Path | str, config: ReviewLensConfig | None = None) -> None:
        self._access = RepoAccess(repo_path)
        self._config = config or load_config(self._access.path)

    @property
    def repo(self) -> pygit2.Repository:
        """
        Direct access to underlying pygit2 Repository.

        Escape hatch for advanced consumers. Bypasses error mapping
        and domain model conversion. Use with caution.
        """
        return self._access.repo

    @property
    def path(self) -> Path:
        """Working directory root (repository path when bare)."""
        return self._access.path

    @property
    def config(self) -> ReviewLensConfig:
        return self._config

    def _merge_base_trees(self, base_branch: str) -> tuple[pygit2.Tree, pygit2.Tree]:
        """Trees of the merge base (HEAD vs base branch) and of HEAD."""
        head = self._access.must_head_commit()
        base = self._access.resolve_branch_commit(
            base_branch, remote=self._config.diff.remote_name
        )
        merge_base = self._access.must_merge_base(head, base)
        with git_operation("read trees"):
            return merge_base.tree, head.tree

    # =========================================================================
    # Change Set
    # =========================================================================

    def list_changed_files(self, base_branch: str) -> list[ChangedFileSummary]:
        """All files changed on this branch since it diverged from ``base_branch``.

        Committed changes come with line counts and a cosmetic flag;
        uncommitted and untracked paths are appended with zero counts.
        """
        base_tree, head_tree = self._merge_base_trees(base_branch)
        committed = self._access.diff_trees(
            base_tree, head_tree, context_lines=self._config.diff.context_lines
        )
        status = self._access.status() if self._access.workdir else {}
        files = aggregate_changes(committed, status)
        log.info("changed_files_listed", base=base_branch, count=len(files))
        return files

    def get_file_diff(
        self,
        file_path: str | Path,
        base_branch: str,
        sources: Sequence[DiffSource] = DEFAULT_SOURCES,
    ) -> FileDiff:
        """Hunks for one file, from the first diff source that has any."""
        path = self._access.normalize_path(file_path)
        base_tree, head_tree = self._merge_base_trees(base_branch)
        ctx = SourceContext(
            access=self._access,
            path=path,
            base_tree=base_tree,
            head_tree=head_tree,
            context_lines=self._config.diff.context_lines,
            binary_sniff_bytes=self._config.diff.binary_sniff_bytes,
        )
        diff = assemble_file_diff(path, resolve_source(ctx, sources))
        log.info(
            "file_diff_computed",
            path=path,
            source=diff.source,
            hunks=len(diff.hunks),
            is_binary=diff.is_binary,
            is_cosmetic=diff.is_cosmetic,
        )
        return diff

    # =========================================================================
    # Repository Info
    # =========================================================================

    def repo_info(self) -> RepoInfo:
        """Current branch, all branches and a suggested default base."""
        current = self._access.head_shorthand()
        with git_operation("list branches"):
            local = [
                BranchInfo(name=name, is_current=name == current, is_remote=False)
                for name in self._access.local_branch_names()
            ]
            remote = [
                BranchInfo(name=name, is_current=False, is_remote=True)
                for name in self._access.remote_branch_names()
            ]
        branches = tuple(local + remote)
        return RepoInfo(
            path=self._access.workdir or "",
            current_branch=current,
            branches=branches,
            default_base=pick_default_base(
                branches, current, self._config.diff.default_base_candidates
            ),
        )

    # =========================================================================
    # Editor
    # =========================================================================

    def open_in_editor(self, file_path: str | Path) -> None:
        """Open a working-directory file with the platform's default application."""
        workdir = self._access.must_workdir("open in editor")
        full_path = workdir / self._access.normalize_path(file_path)
        code = click.launch(str(full_path))
        if code != 0:
            raise ReadFailureError("open in editor", f"launcher exited with status {code}")
        log.debug("editor_launched", path=str(full_path))


# =============================================================================
# Module-level entry points (fresh repository handle per call)
# =============================================================================


def list_changed_files(repo_path: Path | str, base_branch: str) -> list[ChangedFileSummary]:
    return ReviewOps(repo_path).list_changed_files(base_branch)


def get_file_diff(repo_path: Path | str, file_path: str | Path, base_branch: str) -> FileDiff:
    return ReviewOps(repo_path).get_file_diff(file_path, base_branch)


def get_repo_info(repo_path: Path | str) -> RepoInfo:
    return ReviewOps(repo_path).repo_info()


def open_in_editor(repo_path: Path | str, file_path: str | Path) -> None:
    ReviewOps(repo_path).open_in_editor(file_path)

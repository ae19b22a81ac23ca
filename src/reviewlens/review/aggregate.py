"""Build the changed-file listing for a branch.

Committed changes (merge base -> HEAD) are folded per path into line counts
and a cosmetic verdict. Working-directory status then adds every path the
committed diff did not mention, with zero counts.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

from reviewlens.git._internal.constants import (
    DELTA_ADDED,
    DELTA_COPIED,
    DELTA_DELETED,
    DELTA_MODIFIED,
    DELTA_RENAMED,
    DELTA_TYPECHANGE,
    STATUS_DELETED,
    STATUS_MODIFIED,
    STATUS_NEW,
)
from reviewlens.review.assemble import to_change_line
from reviewlens.review.cosmetic import is_cosmetic_change
from reviewlens.review.models import ChangedFileSummary, ChangeLine, FileStatus
from reviewlens.review.sources import delta_path, iter_patches, raw_hunks_from_patch

if TYPE_CHECKING:
    import pygit2

log = structlog.get_logger(__name__)

_DELTA_STATUS_MAP: dict[int, FileStatus] = {
    DELTA_ADDED: "added",
    DELTA_DELETED: "deleted",
    DELTA_MODIFIED: "modified",
    DELTA_RENAMED: "renamed",
    DELTA_COPIED: "copied",
    DELTA_TYPECHANGE: "typechange",
}


def delta_status(status: int) -> FileStatus:
    return _DELTA_STATUS_MAP.get(status, "unknown")


def worktree_status(flags: int) -> FileStatus | None:
    """Map working-tree/index flags to a status, or None to skip the path."""
    if flags & STATUS_NEW:
        return "added"
    if flags & STATUS_DELETED:
        return "deleted"
    if flags & STATUS_MODIFIED:
        return "modified"
    return None


@dataclass(slots=True)
class FileAccumulator:
    """Running totals for one path during a single pass over a diff."""

    path: str
    status: FileStatus
    additions: int = 0
    deletions: int = 0
    removed: list[str] = field(default_factory=list)
    added: list[str] = field(default_factory=list)

    def add_line(self, line: ChangeLine) -> None:
        if line.kind == "add":
            self.additions += 1
            self.added.append(line.content)
        elif line.kind == "delete":
            self.deletions += 1
            self.removed.append(line.content)

    def summary(self) -> ChangedFileSummary:
        # All of a file's changed lines are judged together as one region
        return ChangedFileSummary(
            path=self.path,
            status=self.status,
            additions=self.additions,
            deletions=self.deletions,
            is_cosmetic=is_cosmetic_change(self.removed, self.added),
        )


def fold_diff(diff: pygit2.Diff) -> dict[str, FileAccumulator]:
    """Accumulate per-path status and line statistics from a diff."""
    files: dict[str, FileAccumulator] = {}
    for patch in iter_patches(diff):
        delta = patch.delta
        path = delta_path(delta)
        acc = FileAccumulator(path=path, status=delta_status(delta.status))
        files[path] = acc
        for hunk in raw_hunks_from_patch(patch):
            for raw in hunk.lines:
                acc.add_line(to_change_line(raw))
    return files


def merge_worktree_status(
    files: Mapping[str, ChangedFileSummary], status: Mapping[str, int]
) -> dict[str, ChangedFileSummary]:
    """Add working-directory entries for paths not already listed."""
    merged = dict(files)
    for path, flags in status.items():
        if path in merged:
            continue
        file_status = worktree_status(flags)
        if file_status is None:
            continue
        merged[path] = ChangedFileSummary(path=path, status=file_status)
    return merged


def sort_by_path(files: Iterable[ChangedFileSummary]) -> list[ChangedFileSummary]:
    """Byte-wise ascending path order."""
    return sorted(files, key=lambda f: f.path.encode("utf-8", errors="surrogateescape"))


def aggregate_changes(
    committed: pygit2.Diff, status: Mapping[str, int]
) -> list[ChangedFileSummary]:
    """Fold the committed diff, merge working-directory status, sort by path."""
    folded = {path: acc.summary() for path, acc in fold_diff(committed).items()}
    merged = merge_worktree_status(folded, status)
    log.debug(
        "changes_aggregated",
        committed=len(folded),
        worktree_only=len(merged) - len(folded),
    )
    return sort_by_path(merged.values())

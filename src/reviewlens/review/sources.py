"""Produce one file's raw hunks from the first diff source that has any.

Three source strategies, tried in order:
- committed: merge base tree -> HEAD tree
- working_tree: merge base tree -> index -> working tree (uncommitted edits)
- untracked: read the file from disk and present every line as added

The first source that yields at least one hunk wins. Later sources are never
evaluated once an earlier one succeeds.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

from reviewlens.git._internal.errors import git_operation

if TYPE_CHECKING:
    import pygit2

    from reviewlens.git._internal.access import RepoAccess


log = structlog.get_logger(__name__)

# diff line origins that carry file content; EOF-newline markers are dropped
_CONTENT_ORIGINS = frozenset("+- ")


@dataclass(frozen=True, slots=True)
class RawLine:
    """A diff line as emitted by the source, before structuring."""

    origin: str  # "+", "-" or " "
    content: str
    old_lineno: int | None = None
    new_lineno: int | None = None


@dataclass(frozen=True, slots=True)
class RawHunk:
    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    lines: tuple[RawLine, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class SourceResult:
    """What one source produced for one file."""

    source: str
    hunks: tuple[RawHunk, ...] = field(default_factory=tuple)
    is_binary: bool = False


@dataclass(frozen=True, slots=True)
class SourceContext:
    """Inputs shared by every source for a single file request."""

    access: RepoAccess
    path: str
    base_tree: pygit2.Tree
    head_tree: pygit2.Tree
    context_lines: int = 3
    binary_sniff_bytes: int = 8000


DiffSource = Callable[[SourceContext], SourceResult]


# ============================================================================
# pygit2 patch walking
# ============================================================================


def _lineno(value: int) -> int | None:
    # pygit2 reports -1 for the side a line does not exist on
    return value if value >= 0 else None


def raw_hunks_from_patch(patch: pygit2.Patch) -> tuple[RawHunk, ...]:
    """Convert a pygit2 patch into raw hunks, keeping source order."""
    hunks: list[RawHunk] = []
    for hunk in patch.hunks:
        lines = tuple(
            RawLine(
                origin=line.origin,
                content=line.raw_content.decode("utf-8", errors="replace"),
                old_lineno=_lineno(line.old_lineno),
                new_lineno=_lineno(line.new_lineno),
            )
            for line in hunk.lines
            if line.origin in _CONTENT_ORIGINS
        )
        hunks.append(
            RawHunk(
                old_start=hunk.old_start,
                old_lines=hunk.old_lines,
                new_start=hunk.new_start,
                new_lines=hunk.new_lines,
                lines=lines,
            )
        )
    return tuple(hunks)


def delta_path(delta: pygit2.DiffDelta) -> str:
    """New-side path, falling back to the old side for deletions."""
    return delta.new_file.path or delta.old_file.path


def iter_patches(diff: pygit2.Diff) -> Iterator[pygit2.Patch]:
    with git_operation("read diff"):
        for patch in diff:
            if patch is not None:
                yield patch


def _result_from_diff(source: str, diff: pygit2.Diff, path: str) -> SourceResult:
    hunks: list[RawHunk] = []
    is_binary = False
    for patch in iter_patches(diff):
        delta = patch.delta
        if path not in (delta.new_file.path, delta.old_file.path):
            continue
        is_binary = is_binary or delta.is_binary
        hunks.extend(raw_hunks_from_patch(patch))
    return SourceResult(source=source, hunks=tuple(hunks), is_binary=is_binary)


# ============================================================================
# Source 1: committed range
# ============================================================================


def committed_source(ctx: SourceContext) -> SourceResult:
    """Changes the current branch committed since the merge base."""
    diff = ctx.access.diff_trees(ctx.base_tree, ctx.head_tree, context_lines=ctx.context_lines)
    return _result_from_diff("committed", diff, ctx.path)


# ============================================================================
# Source 2: working tree range
# ============================================================================


def working_tree_source(ctx: SourceContext) -> SourceResult:
    """Staged and unstaged edits relative to the merge base."""
    if ctx.access.workdir is None:
        return SourceResult(source="working_tree")
    diff = ctx.access.diff_tree_to_workdir_with_index(
        ctx.base_tree, context_lines=ctx.context_lines, include_untracked=True
    )
    return _result_from_diff("working_tree", diff, ctx.path)


# ============================================================================
# Source 3: synthetic diff for untracked content
# ============================================================================


def is_binary_content(data: bytes, sniff_bytes: int = 8000) -> bool:
    """Binary if a NUL byte appears in the first ``sniff_bytes`` bytes."""
    return b"\x00" in data[:sniff_bytes]


def split_lines(text: str) -> list[str]:
    """Split on LF, dropping one trailing empty piece and any CR before LF."""
    pieces = text.split("\n")
    if pieces[-1] == "":
        pieces.pop()
    return [p.removesuffix("\r") for p in pieces]


def synthesize_added_hunk(text: str) -> RawHunk | None:
    """One hunk presenting every line of ``text`` as added."""
    lines = tuple(
        RawLine(origin="+", content=f"{line}\n", new_lineno=i)
        for i, line in enumerate(split_lines(text), start=1)
    )
    if not lines:
        return None
    return RawHunk(old_start=0, old_lines=0, new_start=1, new_lines=len(lines), lines=lines)


def untracked_source(ctx: SourceContext) -> SourceResult:
    """Whole-file addition read straight from the working directory."""
    data = ctx.access.read_workdir_file(ctx.path)
    if data is None:
        return SourceResult(source="untracked")
    if is_binary_content(data, ctx.binary_sniff_bytes):
        return SourceResult(source="untracked", is_binary=True)
    hunk = synthesize_added_hunk(data.decode("utf-8", errors="replace"))
    return SourceResult(source="untracked", hunks=(hunk,) if hunk else ())


DEFAULT_SOURCES: tuple[DiffSource, ...] = (
    committed_source,
    working_tree_source,
    untracked_source,
)


# ============================================================================
# Resolution
# ============================================================================


def resolve_source(
    ctx: SourceContext, sources: Sequence[DiffSource] = DEFAULT_SOURCES
) -> SourceResult:
    """Evaluate ``sources`` in order and return the first with hunks.

    When none has hunks the result is empty, binary if any source saw the
    file as binary.
    """
    tried: list[SourceResult] = []
    for source in sources:
        result = source(ctx)
        if result.hunks:
            log.debug(
                "diff_source_selected",
                path=ctx.path,
                source=result.source,
                hunks=len(result.hunks),
            )
            return result
        tried.append(result)

    log.debug("diff_source_empty", path=ctx.path, tried=[r.source for r in tried])
    return SourceResult(source="none", is_binary=any(r.is_binary for r in tried))

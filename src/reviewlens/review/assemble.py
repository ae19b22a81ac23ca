"""Turn raw source hunks into annotated Hunk/FileDiff structures."""

from __future__ import annotations

from collections.abc import Iterable

from reviewlens.review.cosmetic import analyze_lines
from reviewlens.review.models import ChangeLine, FileDiff, Hunk, LineKind
from reviewlens.review.sources import RawHunk, RawLine, SourceResult

_KIND_BY_ORIGIN: dict[str, LineKind] = {
    "+": "add",
    "-": "delete",
    " ": "context",
}


def to_change_line(raw: RawLine) -> ChangeLine:
    kind = _KIND_BY_ORIGIN.get(raw.origin, "context")
    return ChangeLine(
        content=raw.content,
        kind=kind,
        old_lineno=raw.old_lineno if kind != "add" else None,
        new_lineno=raw.new_lineno if kind != "delete" else None,
    )


def assemble_hunk(raw: RawHunk) -> Hunk:
    lines = tuple(to_change_line(line) for line in raw.lines)
    return Hunk(
        old_start=raw.old_start,
        old_lines=raw.old_lines,
        new_start=raw.new_start,
        new_lines=raw.new_lines,
        lines=lines,
        is_cosmetic=analyze_lines(lines),
    )


def assemble_hunks(raw_hunks: Iterable[RawHunk]) -> tuple[Hunk, ...]:
    return tuple(assemble_hunk(raw) for raw in raw_hunks)


def assemble_file_diff(path: str, result: SourceResult) -> FileDiff:
    """Build a FileDiff from the resolved source for ``path``."""
    if result.is_binary:
        return FileDiff(path=path, is_binary=True, source=result.source)
    return FileDiff(path=path, hunks=assemble_hunks(result.hunks), source=result.source)

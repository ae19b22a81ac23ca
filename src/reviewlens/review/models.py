"""Data models for review diffs.

All models are frozen dataclasses with no pygit2 coupling, so they can be
built by hand in tests and serialized with ``to_dict()`` for a UI layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

LineKind = Literal["add", "delete", "context"]

FileStatus = Literal[
    "added",
    "deleted",
    "modified",
    "renamed",
    "copied",
    "typechange",
    "unknown",
]


@dataclass(frozen=True, slots=True)
class ChangeLine:
    """One line of a diff.

    ``content`` keeps the trailing newline when the source had one.
    ``old_lineno`` is set for delete/context lines, ``new_lineno`` for
    add/context lines.
    """

    content: str
    kind: LineKind
    old_lineno: int | None = None
    new_lineno: int | None = None

    @property
    def is_change(self) -> bool:
        return self.kind != "context"

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": self.content,
            "line_type": self.kind,
            "old_lineno": self.old_lineno,
            "new_lineno": self.new_lineno,
        }


@dataclass(frozen=True, slots=True)
class Hunk:
    """A contiguous diff region (1-based starts, VCS-diff convention)."""

    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    lines: tuple[ChangeLine, ...] = field(default_factory=tuple)
    is_cosmetic: bool = False

    @property
    def additions(self) -> int:
        return sum(1 for line in self.lines if line.kind == "add")

    @property
    def deletions(self) -> int:
        return sum(1 for line in self.lines if line.kind == "delete")

    @property
    def header(self) -> str:
        return f"@@ -{self.old_start},{self.old_lines} +{self.new_start},{self.new_lines} @@"

    def to_dict(self) -> dict[str, Any]:
        return {
            "old_start": self.old_start,
            "old_lines": self.old_lines,
            "new_start": self.new_start,
            "new_lines": self.new_lines,
            "lines": [line.to_dict() for line in self.lines],
            "is_cosmetic": self.is_cosmetic,
        }


@dataclass(frozen=True, slots=True)
class FileDiff:
    """One file's full change, hunks in source order."""

    path: str
    hunks: tuple[Hunk, ...] = field(default_factory=tuple)
    is_binary: bool = False
    source: str | None = None  # which diff source supplied the hunks

    @property
    def is_cosmetic(self) -> bool:
        # Binary files carry no hunks, so they are never cosmetic
        return bool(self.hunks) and all(h.is_cosmetic for h in self.hunks)

    @property
    def additions(self) -> int:
        return sum(h.additions for h in self.hunks)

    @property
    def deletions(self) -> int:
        return sum(h.deletions for h in self.hunks)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "hunks": [h.to_dict() for h in self.hunks],
            "is_binary": self.is_binary,
            "is_cosmetic": self.is_cosmetic,
        }


@dataclass(frozen=True, slots=True)
class ChangedFileSummary:
    """One row in the change-set listing."""

    path: str
    status: FileStatus
    additions: int = 0
    deletions: int = 0
    is_cosmetic: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "status": self.status,
            "additions": self.additions,
            "deletions": self.deletions,
            "is_cosmetic": self.is_cosmetic,
        }

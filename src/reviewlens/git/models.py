"""Serializable data models for repository info."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class BranchInfo:
    """A local or remote-tracking branch."""

    name: str
    is_current: bool
    is_remote: bool

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "is_current": self.is_current, "is_remote": self.is_remote}


@dataclass(frozen=True, slots=True)
class RepoInfo:
    """Repository overview used to pick a base branch."""

    path: str
    current_branch: str
    branches: tuple[BranchInfo, ...] = field(default_factory=tuple)
    default_base: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "current_branch": self.current_branch,
            "branches": [b.to_dict() for b in self.branches],
            "default_base": self.default_base,
        }


def pick_default_base(
    branches: tuple[BranchInfo, ...], current_branch: str, candidates: list[str]
) -> str:
    """First existing local candidate, else first other local branch, else current."""
    local = [b for b in branches if not b.is_remote]
    local_names = {b.name for b in local}
    for name in candidates:
        if name in local_names:
            return name
    for b in local:
        if not b.is_current:
            return b.name
    return current_branch

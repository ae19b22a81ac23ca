"""Tests for repository info models."""

from __future__ import annotations

from reviewlens.git.models import BranchInfo, RepoInfo, pick_default_base


def _local(name: str, current: bool = False) -> BranchInfo:
    return BranchInfo(name=name, is_current=current, is_remote=False)


def _remote(name: str) -> BranchInfo:
    return BranchInfo(name=name, is_current=False, is_remote=True)


class TestPickDefaultBase:
    def test_first_candidate_present(self) -> None:
        branches = (_local("feature", current=True), _local("master"), _local("main"))
        assert pick_default_base(branches, "feature", ["main", "master"]) == "main"

    def test_second_candidate(self) -> None:
        branches = (_local("feature", current=True), _local("master"))
        assert pick_default_base(branches, "feature", ["main", "master"]) == "master"

    def test_remote_candidates_ignored(self) -> None:
        branches = (_local("feature", current=True), _local("trunk"), _remote("origin/main"))
        assert pick_default_base(branches, "feature", ["main", "origin/main"]) == "trunk"

    def test_first_non_current_local(self) -> None:
        branches = (_local("develop"), _local("feature", current=True), _local("trunk"))
        assert pick_default_base(branches, "feature", ["main"]) == "develop"

    def test_only_current_branch(self) -> None:
        branches = (_local("solo", current=True),)
        assert pick_default_base(branches, "solo", ["main"]) == "solo"

    def test_candidate_may_be_current(self) -> None:
        branches = (_local("main", current=True), _local("feature"))
        assert pick_default_base(branches, "main", ["main"]) == "main"


class TestRepoInfoSerialization:
    def test_to_dict(self) -> None:
        info = RepoInfo(
            path="/work/repo/",
            current_branch="feature",
            branches=(_local("feature", current=True), _remote("origin/main")),
            default_base="main",
        )
        assert info.to_dict() == {
            "path": "/work/repo/",
            "current_branch": "feature",
            "branches": [
                {"name": "feature", "is_current": True, "is_remote": False},
                {"name": "origin/main", "is_current": False, "is_remote": True},
            ],
            "default_base": "main",
        }

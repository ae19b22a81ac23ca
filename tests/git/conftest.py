"""Test fixtures for git module."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pygit2
import pytest

from reviewlens.config import ReviewLensConfig

if TYPE_CHECKING:
    from collections.abc import Callable, Generator

SIG = pygit2.Signature("Test User", "test@example.com")


def commit_files(
    repo: pygit2.Repository,
    files: dict[str, str | bytes | None],
    message: str,
) -> pygit2.Oid:
    """Write files (None deletes), stage them and commit on HEAD."""
    workdir = Path(repo.workdir)
    for name, content in files.items():
        path = workdir / name
        if content is None:
            path.unlink()
            repo.index.remove(name)
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
        repo.index.add(name)
    repo.index.write()
    tree = repo.index.write_tree()
    parents = [] if repo.head_is_unborn else [repo.head.target]
    return repo.create_commit("HEAD", SIG, SIG, message, tree, parents)


def branch_off(repo: pygit2.Repository, name: str) -> None:
    """Create ``name`` at HEAD and switch to it."""
    branch = repo.branches.local.create(name, repo.head.peel(pygit2.Commit))
    repo.checkout(branch)


@pytest.fixture
def config() -> ReviewLensConfig:
    """Default configuration, independent of any YAML or env on the host."""
    return ReviewLensConfig()


@pytest.fixture
def temp_repo(tmp_path: Path) -> Generator[pygit2.Repository, None, None]:
    """Create a temporary git repository with initial commit on main."""
    repo_path = tmp_path / "repo"
    repo_path.mkdir()

    repo = pygit2.init_repository(str(repo_path), initial_head="main")

    # Configure user
    repo.config["user.name"] = "Test User"
    repo.config["user.email"] = "test@example.com"

    commit_files(repo, {"README.md": "# Test Repo\n"}, "Initial commit")

    yield repo


@pytest.fixture
def feature_repo(temp_repo: pygit2.Repository) -> pygit2.Repository:
    """Repository on branch ``feature`` two commits ahead of ``main``.

    One commit adds a.txt (10 plain lines), the other only re-indents b.txt,
    which exists on main.
    """
    commit_files(
        temp_repo,
        {"b.txt": "def f():\n    return 1\n\nvalue = f()\n"},
        "Add b.txt",
    )
    branch_off(temp_repo, "feature")
    commit_files(
        temp_repo,
        {"a.txt": "".join(f"line {i}\n" for i in range(10))},
        "Add a.txt",
    )
    commit_files(
        temp_repo,
        {"b.txt": "def f():\n  return 1\n\nvalue = f()\n"},
        "Reindent b.txt",
    )
    return temp_repo


@pytest.fixture
def bare_repo(tmp_path: Path, temp_repo: pygit2.Repository) -> pygit2.Repository:
    """Bare clone of temp_repo."""
    bare_path = tmp_path / "bare.git"
    return pygit2.clone_repository(temp_repo.path, str(bare_path), bare=True)


@pytest.fixture
def commit() -> Callable[..., pygit2.Oid]:
    return commit_files


@pytest.fixture
def checkout_new() -> Callable[[pygit2.Repository, str], None]:
    return branch_off

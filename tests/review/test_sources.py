"""Tests for diff source strategies and resolution order."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from reviewlens.review.sources import (
    RawHunk,
    RawLine,
    SourceContext,
    SourceResult,
    is_binary_content,
    resolve_source,
    split_lines,
    synthesize_added_hunk,
    untracked_source,
)


def _ctx(access: Any = None, path: str = "f.txt", sniff: int = 8000) -> SourceContext:
    return SourceContext(
        access=access or MagicMock(),
        path=path,
        base_tree=MagicMock(),
        head_tree=MagicMock(),
        binary_sniff_bytes=sniff,
    )


def _hunk() -> RawHunk:
    return RawHunk(1, 1, 1, 1, (RawLine("+", "x\n", None, 1),))


class TestSplitLines:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("", []),
            ("a", ["a"]),
            ("a\n", ["a"]),
            ("a\nb\n", ["a", "b"]),
            ("a\r\nb\r\n", ["a", "b"]),
            ("\n", [""]),
            ("a\n\n", ["a", ""]),
        ],
    )
    def test_split(self, text: str, expected: list[str]) -> None:
        assert split_lines(text) == expected


class TestBinarySniff:
    def test_nul_in_prefix(self) -> None:
        assert is_binary_content(b"abc\x00def")

    def test_text(self) -> None:
        assert not is_binary_content(b"plain text\n")

    def test_nul_beyond_window_is_text(self) -> None:
        assert not is_binary_content(b"a" * 8000 + b"\x00")

    def test_nul_at_window_edge(self) -> None:
        assert is_binary_content(b"a" * 7999 + b"\x00")

    def test_custom_window(self) -> None:
        assert not is_binary_content(b"abcd\x00", sniff_bytes=4)


class TestSynthesizeAddedHunk:
    def test_whole_file_as_additions(self) -> None:
        hunk = synthesize_added_hunk("first\nsecond\nthird")
        assert hunk is not None
        assert (hunk.old_start, hunk.old_lines) == (0, 0)
        assert (hunk.new_start, hunk.new_lines) == (1, 3)
        assert [line.origin for line in hunk.lines] == ["+", "+", "+"]
        assert [line.content for line in hunk.lines] == ["first\n", "second\n", "third\n"]
        assert [line.new_lineno for line in hunk.lines] == [1, 2, 3]
        assert all(line.old_lineno is None for line in hunk.lines)

    def test_empty_text_has_no_hunk(self) -> None:
        assert synthesize_added_hunk("") is None


class TestUntrackedSource:
    def test_missing_file_is_empty(self) -> None:
        access = MagicMock()
        access.read_workdir_file.return_value = None
        result = untracked_source(_ctx(access))
        assert result == SourceResult(source="untracked")

    def test_binary_file(self) -> None:
        access = MagicMock()
        access.read_workdir_file.return_value = b"\x89PNG\x00\x00"
        result = untracked_source(_ctx(access))
        assert result.is_binary
        assert result.hunks == ()

    def test_text_file(self) -> None:
        access = MagicMock()
        access.read_workdir_file.return_value = b"one\ntwo\n"
        result = untracked_source(_ctx(access))
        assert not result.is_binary
        assert len(result.hunks) == 1
        assert result.hunks[0].new_lines == 2

    def test_invalid_utf8_is_replaced(self) -> None:
        access = MagicMock()
        access.read_workdir_file.return_value = b"caf\xe9\n"
        result = untracked_source(_ctx(access))
        assert result.hunks[0].lines[0].content == "caf�\n"


class TestResolveSource:
    """First source with hunks wins; later sources are not evaluated."""

    def test_first_non_empty_wins(self) -> None:
        calls: list[str] = []

        def empty(ctx: SourceContext) -> SourceResult:
            calls.append("empty")
            return SourceResult(source="empty")

        def full(ctx: SourceContext) -> SourceResult:
            calls.append("full")
            return SourceResult(source="full", hunks=(_hunk(),))

        def never(ctx: SourceContext) -> SourceResult:
            calls.append("never")
            raise AssertionError("evaluated after a successful source")

        result = resolve_source(_ctx(), [empty, full, never])

        assert result.source == "full"
        assert calls == ["empty", "full"]

    def test_all_empty(self) -> None:
        result = resolve_source(
            _ctx(), [lambda ctx: SourceResult("a"), lambda ctx: SourceResult("b")]
        )
        assert result.hunks == ()
        assert not result.is_binary

    def test_binary_seen_by_any_source_is_reported(self) -> None:
        result = resolve_source(
            _ctx(),
            [
                lambda ctx: SourceResult("a", is_binary=True),
                lambda ctx: SourceResult("b"),
            ],
        )
        assert result.hunks == ()
        assert result.is_binary

    def test_errors_propagate(self) -> None:
        def boom(ctx: SourceContext) -> SourceResult:
            raise RuntimeError("read failed")

        with pytest.raises(RuntimeError, match="read failed"):
            resolve_source(_ctx(), [boom])

"""Tests for hunk-level cosmetic analysis."""

from __future__ import annotations

from reviewlens.review.cosmetic import analyze_lines, is_cosmetic_change
from reviewlens.review.models import ChangeLine


def _lines(
    removed: list[str], added: list[str], context: list[str] | None = None
) -> list[ChangeLine]:
    lines = [ChangeLine(content=c, kind="context") for c in context or []]
    lines += [ChangeLine(content=c, kind="delete") for c in removed]
    lines += [ChangeLine(content=c, kind="add") for c in added]
    return lines


class TestPureDeletion:
    def test_all_comments_removed_is_cosmetic(self) -> None:
        assert is_cosmetic_change(["// old\n", "# note\n", "\n"], [])

    def test_single_code_line_removed_is_not_cosmetic(self) -> None:
        assert not is_cosmetic_change(["// old\n", "doWork();\n"], [])


class TestPureAddition:
    def test_blank_and_comment_lines_added_is_cosmetic(self) -> None:
        assert is_cosmetic_change([], ["\n", "/* explain */\n"])

    def test_code_added_is_not_cosmetic(self) -> None:
        assert not is_cosmetic_change([], ["line 0\n", "line 1\n"])


class TestReflow:
    def test_wrapped_line_is_cosmetic(self) -> None:
        """One line split in two keeps the same characters in the same order."""
        removed = ["const x = a + b + c;"]
        added = ["const x =", "  a + b + c;"]
        assert is_cosmetic_change(removed, added)

    def test_joined_lines_are_cosmetic(self) -> None:
        removed = ['<div class="a b"\n', '     id="x">\n']
        added = ['<div class="a b" id="x">\n']
        assert is_cosmetic_change(removed, added)

    def test_reordered_tokens_are_not_reflow(self) -> None:
        assert not is_cosmetic_change(['class="a b c"\n'], ['class="c b a"\n', "\n"])


class TestEqualCountPairs:
    def test_indentation_only_pairs_are_cosmetic(self) -> None:
        assert is_cosmetic_change(["  foo();", "bar();"], ["foo();", "  bar();"])

    def test_second_pair_real_change_is_not_cosmetic(self) -> None:
        assert not is_cosmetic_change(["foo();", "bar();"], ["foo();", "baz();"])

    def test_case_only_pairs_are_cosmetic(self) -> None:
        assert is_cosmetic_change(["SELECT 1;\n", "FROM t;\n"], ["select 1;\n", "from t;\n"])

    def test_comment_pairs_are_cosmetic(self) -> None:
        assert is_cosmetic_change(["# old wording\n"], ["# new wording\n"])

    def test_pairing_is_positional(self) -> None:
        """Swapped lines are compared by position, not by best match."""
        removed = ["alpha();\n", "beta();\n"]
        added = ["beta();\n", "alpha();\n"]
        assert not is_cosmetic_change(removed, added)


class TestUnequalCounts:
    def test_all_noise_is_cosmetic(self) -> None:
        assert is_cosmetic_change(["# a\n"], ["# b\n", "\n", "// c\n"])

    def test_any_code_is_not_cosmetic(self) -> None:
        assert not is_cosmetic_change(["# a\n"], ["# b\n", "run()\n"])


class TestAnalyzeLines:
    def test_context_lines_are_ignored(self) -> None:
        lines = _lines(["    x = 1\n"], ["  x = 1\n"], context=["def f():\n"])
        assert analyze_lines(lines)

    def test_context_only_is_never_cosmetic(self) -> None:
        assert not analyze_lines(_lines([], [], context=["\n", "# c\n"]))

    def test_empty_is_never_cosmetic(self) -> None:
        assert not analyze_lines([])

    def test_verdict_is_stable(self) -> None:
        lines = _lines(["foo();", "bar();"], ["foo();", "baz();"])
        assert analyze_lines(lines) == analyze_lines(lines)
        lines = _lines(["  foo();"], ["foo();"])
        assert analyze_lines(lines) is analyze_lines(lines) is True

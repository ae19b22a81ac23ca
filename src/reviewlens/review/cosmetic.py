"""Hunk-level cosmetic analysis.

Decides whether one change region carries semantic weight. Only added and
removed lines take part; context lines are ignored. Rules, first match wins:

1. pure deletion: every removed line is noise
2. pure addition: every added line is noise
3. reflow: removed and added text are identical once all whitespace is gone,
   whatever the line counts
4. equal counts: removed[i] / added[i] pairs are each cosmetic
   (positional pairing, no similarity matching)
5. otherwise: every line on both sides is noise

A region with no added or removed lines is never cosmetic.
"""

from __future__ import annotations

from collections.abc import Iterable

from reviewlens.review.lines import is_cosmetic_pair, is_noise_line, normalize
from reviewlens.review.models import ChangeLine


def is_cosmetic_change(removed: list[str], added: list[str]) -> bool:
    """Classify a change region given its removed and added line contents."""
    if not removed and not added:
        return False

    if not added:
        return all(is_noise_line(line) for line in removed)

    if not removed:
        return all(is_noise_line(line) for line in added)

    if normalize("".join(removed)) == normalize("".join(added)):
        return True

    if len(removed) == len(added):
        return all(is_cosmetic_pair(old, new) for old, new in zip(removed, added, strict=True))

    return all(is_noise_line(line) for line in added) and all(
        is_noise_line(line) for line in removed
    )


def analyze_lines(lines: Iterable[ChangeLine]) -> bool:
    """Classify a hunk's line sequence."""
    removed: list[str] = []
    added: list[str] = []
    for line in lines:
        if line.kind == "delete":
            removed.append(line.content)
        elif line.kind == "add":
            added.append(line.content)
    return is_cosmetic_change(removed, added)

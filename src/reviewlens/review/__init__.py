"""Review diff package - diff synthesis and cosmetic-change classification.

Public API re-exports for the review subpackage.
"""

from reviewlens.review.aggregate import aggregate_changes
from reviewlens.review.assemble import assemble_file_diff, assemble_hunk
from reviewlens.review.cosmetic import analyze_lines, is_cosmetic_change
from reviewlens.review.lines import (
    differs_only_in_case,
    differs_only_in_indentation,
    differs_only_in_trailing_whitespace,
    differs_only_in_whitespace,
    is_noise_line,
    normalize,
)
from reviewlens.review.models import ChangedFileSummary, ChangeLine, FileDiff, Hunk
from reviewlens.review.sources import (
    DEFAULT_SOURCES,
    SourceContext,
    SourceResult,
    committed_source,
    resolve_source,
    untracked_source,
    working_tree_source,
)

__all__ = [
    "DEFAULT_SOURCES",
    "ChangeLine",
    "ChangedFileSummary",
    "FileDiff",
    "Hunk",
    "SourceContext",
    "SourceResult",
    "aggregate_changes",
    "analyze_lines",
    "assemble_file_diff",
    "assemble_hunk",
    "committed_source",
    "differs_only_in_case",
    "differs_only_in_indentation",
    "differs_only_in_trailing_whitespace",
    "differs_only_in_whitespace",
    "is_cosmetic_change",
    "is_noise_line",
    "normalize",
    "resolve_source",
    "untracked_source",
    "working_tree_source",
]

"""Text Fusion: two-pane, line-by-line text comparison.

The comparison core lives in ``text_fusion.utils`` and has no Textual
dependency; the Textual app in ``text_fusion.entry_points`` is a thin host
around it.
"""

from __future__ import annotations

from text_fusion.utils.diff_counter import count_different_lines, different_line_indices
from text_fusion.utils.line_highlighter import DIFFERENT_MARKER, Highlight, LineHighlighter, classify

__version__ = "0.1.0"

__all__ = [
    "DIFFERENT_MARKER",
    "Highlight",
    "LineHighlighter",
    "classify",
    "count_different_lines",
    "different_line_indices",
]

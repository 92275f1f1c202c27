"""Whole-buffer difference counting for Text Fusion.

Lines are aligned purely by index: line ``i`` of the left text is compared
with line ``i`` of the right text. There is no insertion or deletion
detection, so a single inserted line shifts every line after it.
"""

from __future__ import annotations

from typing import Iterator

from .line_split import lines_differ, split_lines


def _iter_different_indices(left_text: str, right_text: str) -> Iterator[int]:
    left_lines = split_lines(left_text)
    right_lines = split_lines(right_text)
    left_count = len(left_lines)
    right_count = len(right_lines)

    for i in range(max(left_count, right_count)):
        left_line = left_lines[i] if i < left_count else ""
        right_line = right_lines[i] if i < right_count else None
        if lines_differ(left_line, right_line):
            yield i


def count_different_lines(left_text: str, right_text: str) -> int:
    """Count the left lines that differ from the right line at the same index.

    Blank left lines are never counted, even when the right side has content
    there. Right-only trailing lines are therefore never counted either.

    Args:
        left_text: Full text of the left pane
        right_text: Full text of the right pane

    Returns:
        Number of differing lines (>= 0)
    """
    return sum(1 for _ in _iter_different_indices(left_text, right_text))


def different_line_indices(left_text: str, right_text: str) -> list[int]:
    """Zero-based indices of the lines counted by ``count_different_lines``."""
    return list(_iter_different_indices(left_text, right_text))

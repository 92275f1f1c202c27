"""Per-line difference highlighting for the left pane.

The rendering surface walks the left document line by line, in order, and
asks a ``LineHighlighter`` what to mark on each line. The highlighter keeps
a cursor (the index of the next line it expects) and a copy of the right
pane's text to compare against.

Calling protocol (not checked at runtime):
- calls to ``classify_and_advance`` are sequential and follow document order;
- every render pass starts by positioning the cursor, either with
  ``set_cursor_line``/``reset`` or through ``highlight_pass``;
- the reference text is pushed with ``on_reference_changed`` whenever the
  right pane changes, before the next render pass.

For surfaces that render lines independently, ``classify`` gives the same
answer without any cursor state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

from .line_split import lines_differ, split_lines

# Opaque tag for a "different" line; the host maps it to a visual style.
DIFFERENT_MARKER = "fusion.different"


@dataclass(frozen=True)
class Highlight:
    """A byte range of one line tagged with a marker."""

    start: int
    end: int
    marker: str = DIFFERENT_MARKER

    @property
    def byte_range(self) -> range:
        return range(self.start, self.end)

    def to_span(self) -> tuple[int, int, str]:
        """(start, end, marker) triple as consumed by text renderers."""
        return (self.start, self.end, self.marker)


def _reference_line_at(reference_lines: Sequence[str], line_index: int) -> Optional[str]:
    if 0 <= line_index < len(reference_lines):
        return reference_lines[line_index]
    return None


def _classify_against(line_index: int, line_text: str, reference_lines: Sequence[str]) -> Optional[Highlight]:
    reference_line = _reference_line_at(reference_lines, line_index)
    if not lines_differ(line_text, reference_line):
        return None
    return Highlight(0, len(line_text.encode("utf-8")))


def classify(line_index: int, left_line: str, reference_text: str) -> Optional[Highlight]:
    """Classify one left line without any cursor state.

    Args:
        line_index: Zero-based index of ``left_line`` in the left document
        left_line: The left line's text, without its terminator
        reference_text: Full text of the right pane

    Returns:
        A highlight spanning the whole line, or None when it is not different
    """
    return _classify_against(line_index, left_line, split_lines(reference_text))


class LineHighlighter:
    """Stateful, resettable line classifier driven by a render pass."""

    def __init__(self, reference_text: str = ""):
        self._reference_text = ""
        self._reference_lines: list[str] = []
        self._current_line = 0
        self.initialize(reference_text)

    @property
    def current_line(self) -> int:
        """Index of the line the next ``classify_and_advance`` call refers to."""
        return self._current_line

    @property
    def reference_text(self) -> str:
        return self._reference_text

    def initialize(self, reference_text: str) -> LineHighlighter:
        """Set the reference text and move the cursor back to line 0."""
        self.on_reference_changed(reference_text)
        self._current_line = 0
        return self

    def on_reference_changed(self, new_reference_text: str) -> None:
        """Replace the reference text. The cursor is left where it is."""
        self._reference_text = new_reference_text
        self._reference_lines = split_lines(new_reference_text)

    def set_cursor_line(self, line_index: int) -> None:
        """Position the cursor, e.g. when rendering resumes mid-document."""
        self._current_line = line_index

    def reset(self) -> None:
        self.set_cursor_line(0)

    def classify_and_advance(self, line_text: str) -> list[Highlight]:
        """Classify the line under the cursor, then move the cursor forward.

        The cursor advances even when nothing is highlighted.

        Returns:
            An empty list, or a single highlight covering the full byte
            length of ``line_text``
        """
        highlight = _classify_against(self._current_line, line_text, self._reference_lines)
        self._current_line += 1
        return [highlight] if highlight is not None else []

    def highlight_pass(self, lines: Iterable[str], start: int = 0) -> Iterator[tuple[int, list[Highlight]]]:
        """Run a render pass over ``lines``, the first of which is line ``start``.

        Yields ``(line_index, highlights)`` for every line, including lines
        with no highlight.
        """
        self.set_cursor_line(start)
        for line_text in lines:
            line_index = self._current_line
            yield line_index, self.classify_and_advance(line_text)

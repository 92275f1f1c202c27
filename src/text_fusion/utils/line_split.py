"""Line splitting and the shared line comparison rule.

Both the whole-buffer counter and the per-line highlighter go through
``lines_differ`` so the two can never disagree on what counts as a
different line.
"""

from __future__ import annotations

from typing import Optional


def split_lines(text: str) -> list[str]:
    r"""Split a buffer into the lines between terminators.

    - ``\n`` ends a line; a ``\r`` right before it is dropped.
    - A trailing terminator does not produce an extra empty line.
    - An unterminated last line is kept as-is.

    >>> split_lines("a\r\nb\n")
    ['a', 'b']
    >>> split_lines("")
    []
    """
    lines = text.split("\n")
    tail = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if tail:
        lines.append(tail)
    return lines


def is_blank(line: str) -> bool:
    """True when the line is empty once surrounding whitespace is stripped."""
    return not line.strip()


def lines_differ(left_line: str, right_line: Optional[str]) -> bool:
    """Decide whether a left line counts as different from its right counterpart.

    A blank left line never counts. A non-blank left line with no right line
    at the same index always counts; otherwise the two lines are compared
    exactly.
    """
    if is_blank(left_line):
        return False
    if right_line is None:
        return True
    return left_line != right_line


def has_first_line_content(text: str) -> bool:
    """True when the buffer's first line exists and is not blank."""
    lines = split_lines(text)
    return bool(lines) and not is_blank(lines[0])

"""Comparison status shown under the two panes."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from rich.text import Text

from .line_split import has_first_line_content


class ComparisonStatus(Enum):
    """Overall state of a left/right comparison."""

    EMPTY = "empty"
    MATCH = "match"
    DIFFERENT = "different"


_STATUS_STYLES = {
    ComparisonStatus.MATCH: "rgb(0,153,0)",
    ComparisonStatus.DIFFERENT: "rgb(204,0,0)",
    ComparisonStatus.EMPTY: "rgb(128,128,128)",
}

# CSS classes applied to the left pane
MATCH_TINT = "matching"
DIFFERENT_TINT = "differing"


def comparison_status(left_text: str, differences_count: int) -> ComparisonStatus:
    """Derive the status from the left text and the current difference count.

    A left pane whose first line is blank reports EMPTY even when it matches
    the right pane.
    """
    if differences_count > 0:
        return ComparisonStatus.DIFFERENT
    if has_first_line_content(left_text):
        return ComparisonStatus.MATCH
    return ComparisonStatus.EMPTY


def status_message(status: ComparisonStatus, differences_count: int = 0) -> str:
    if status is ComparisonStatus.MATCH:
        return "✓ Texts match perfectly"
    if status is ComparisonStatus.DIFFERENT:
        return f"⚠ {differences_count} line(s) differ"
    return "Type in both input fields to compare"


def status_style(status: ComparisonStatus) -> str:
    return _STATUS_STYLES[status]


def status_text(status: ComparisonStatus, differences_count: int = 0) -> Text:
    """Styled status line ready for a Static widget."""
    return Text(status_message(status, differences_count), style=status_style(status))


def pane_tint(left_text: str, differences_count: int) -> Optional[str]:
    """CSS class tinting the left pane, or None for no tint.

    The pane is only tinted once its first line has content.
    """
    if not has_first_line_content(left_text):
        return None
    return DIFFERENT_TINT if differences_count > 0 else MATCH_TINT

"""Two-pane compare screen.

The left pane is a ``DifferenceTextArea`` that marks lines differing from
the right pane; the right pane is a plain ``TextArea``. Every edit in either
pane recounts the differing lines and refreshes the status line and the
left pane tint.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Static, TextArea

from text_fusion.utils.base_screen import BaseScreen
from text_fusion.utils.config import config
from text_fusion.utils.diff_counter import count_different_lines
from text_fusion.utils.error_handling import log_ui_error
from text_fusion.utils.logger import log
from text_fusion.utils.status import ComparisonStatus, comparison_status, pane_tint, status_text
from text_fusion.widgets.difference_text_area import DifferenceTextArea


def document_text(text_area: TextArea) -> str:
    """Pane text rebuilt from the editor's own lines.

    The left pane highlights ``document.lines``, which also break on a bare
    ``\\r``. Counting and the reference use this text so both see the same lines.
    """
    return "\n".join(text_area.document.lines)


class CompareScreen(BaseScreen):
    """Edit two texts side by side and see which left lines differ."""

    BINDINGS = [
        Binding("ctrl+l", "clear_panes", "Clear", priority=True),
        Binding("ctrl+s", "swap_panes", "Swap", priority=True),
    ]

    DEFAULT_CSS = """
    #compare-root {
        width: 100%;
        height: 1fr;
        padding: 1 2;
    }
    #panes {
        width: 100%;
        height: 1fr;
    }
    #panes > TextArea {
        width: 1fr;
        height: 100%;
    }
    #status {
        width: 100%;
        content-align: center middle;
        padding: 0 1;
    }
    """

    def __init__(self, left_text: str = "", right_text: str = "") -> None:
        super().__init__(page_name="Compare")
        self._initial_left = left_text
        self._initial_right = right_text
        self._left: DifferenceTextArea | None = None
        self._right: TextArea | None = None
        self._status: Static | None = None
        self.differences_count = 0
        self.status = ComparisonStatus.EMPTY

    def compose_main_content(self) -> ComposeResult:
        self._left = DifferenceTextArea(
            self._initial_left,
            reference_text=self._initial_right,
            id="left-pane",
            placeholder=config.placeholder,
        )
        self._right = TextArea(self._initial_right, id="right-pane", placeholder=config.placeholder)
        self._status = Static("", id="status")
        with Vertical(id="compare-root"):
            with Horizontal(id="panes"):
                yield self._left
                yield self._right
            yield self._status

    def get_footer_text(self) -> str:
        return (
            " [orange1]Ctrl+L[/orange1] Clear    "
            "[orange1]Ctrl+S[/orange1] Swap    "
            "[orange1]Ctrl+Q[/orange1] Quit"
        )

    async def on_mount(self):
        await super().on_mount()
        try:
            self._left.styles.margin = (0, config.pane_spacing, 0, 0)
            self._status.styles.height = config.status_height
        except (AttributeError, ValueError) as e:
            log_ui_error("compare layout", "applying config", e)
        self._left.set_reference(document_text(self._right))
        self.refresh_comparison()
        self.safe_set_focus(self._left)

    @property
    def left_pane(self) -> DifferenceTextArea | None:
        return self._left

    @property
    def right_pane(self) -> TextArea | None:
        return self._right

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        # Left edits already re-ran the highlight pass inside TextArea
        if event.text_area is self._right:
            self._left.set_reference(document_text(self._right))
        self.refresh_comparison()

    def refresh_comparison(self) -> None:
        """Recount differing lines and update the status and pane tint."""
        if self._left is None or self._right is None:
            return

        left_text = document_text(self._left)
        self.differences_count = count_different_lines(left_text, document_text(self._right))
        self.status = comparison_status(left_text, self.differences_count)
        log.debug(f"[COMPARE] {self.differences_count} differing line(s), status={self.status.value}")

        try:
            self._status.update(status_text(self.status, self.differences_count))
            self._left.set_tint(pane_tint(left_text, self.differences_count))
        except (AttributeError, RuntimeError) as e:
            log_ui_error("status", "updating", e)

    def _load_panes(self, left_text: str, right_text: str) -> None:
        self._right.load_text(right_text)
        self._left.load_text(left_text)
        self._left.set_reference(document_text(self._right))
        self.refresh_comparison()

    def action_clear_panes(self) -> None:
        if self._left is None or self._right is None:
            return
        self._load_panes("", "")

    def action_swap_panes(self) -> None:
        if self._left is None or self._right is None:
            return
        self._load_panes(document_text(self._right), document_text(self._left))
